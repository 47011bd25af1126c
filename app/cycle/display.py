"""
Phase presentation shared by every front end.

The widget and the configuring app draw the same three states:

    OUT           blue border,  "OUT"
    IN            green border, "IN"
    unconfigured  gray border,  "SET DATE"

Subtitles come in two flavours: verbose ("IN phase • Day 3 of 21") and
compact ("Day 3 of 21").  The gradient colour fades as a phase progresses
and is returned as an HSB triple in 0-1 so each front end can convert it
to its own colour type.
"""

from app.schemas.cycle_phase import (
    IN_PHASE_DAYS,
    OUT_PHASE_DAYS,
    CyclePhase,
    InPhase,
    OutPhase,
    PhaseDisplay,
    Unconfigured,
)

# (hue, saturation, brightness) at the first and the last day of a phase.
_IN_GRADIENT = ((0.33, 0.8, 0.75), (0.25, 0.6, 0.6))
_OUT_GRADIENT = ((0.67, 0.85, 0.8), (0.67, 0.75, 0.55))
_GRAY_HSB = (0.0, 0.0, 0.56)


def _unknown(phase: object) -> TypeError:
    return TypeError(f"Unknown cycle phase: {phase!r}")


def display_text(phase: CyclePhase) -> str:
    if isinstance(phase, InPhase):
        return "IN"
    if isinstance(phase, OutPhase):
        return "OUT"
    if isinstance(phase, Unconfigured):
        return "SET DATE"
    raise _unknown(phase)


def subtitle_text(phase: CyclePhase, verbose: bool = True) -> str:
    """Day counter shown under the phase name (1-based)."""
    if isinstance(phase, InPhase):
        counter = f"Day {phase.day_index + 1} of {IN_PHASE_DAYS}"
        return f"IN phase • {counter}" if verbose else counter
    if isinstance(phase, OutPhase):
        counter = f"Day {phase.day_index + 1} of {OUT_PHASE_DAYS}"
        return f"OUT phase • {counter}" if verbose else counter
    if isinstance(phase, Unconfigured):
        return "Open app to configure"
    raise _unknown(phase)


def border_color(phase: CyclePhase) -> str:
    if isinstance(phase, InPhase):
        return "green"
    if isinstance(phase, OutPhase):
        return "blue"
    if isinstance(phase, Unconfigured):
        return "gray"
    raise _unknown(phase)


def _interpolate(
    bounds: tuple[tuple[float, float, float], tuple[float, float, float]],
    progress: float,
) -> tuple[float, float, float]:
    first, last = bounds
    return tuple(round(a + (b - a) * progress, 4) for a, b in zip(first, last))


def gradient_color(phase: CyclePhase) -> tuple[float, float, float]:
    """HSB colour for ``phase``; 0.0 progress on day 0, 1.0 on the last day."""
    if isinstance(phase, InPhase):
        return _interpolate(_IN_GRADIENT, phase.day_index / (IN_PHASE_DAYS - 1))
    if isinstance(phase, OutPhase):
        return _interpolate(_OUT_GRADIENT, phase.day_index / (OUT_PHASE_DAYS - 1))
    if isinstance(phase, Unconfigured):
        return _GRAY_HSB
    raise _unknown(phase)


def describe(phase: CyclePhase, verbose: bool = True) -> PhaseDisplay:
    """Bundle every presentation attribute of ``phase``."""
    return PhaseDisplay(
        text=display_text(phase),
        subtitle=subtitle_text(phase, verbose=verbose),
        border_color=border_color(phase),
        gradient_hsb=gradient_color(phase),
    )
