"""
Cycle phase schemas.

The cycle repeats every 28 days and is split in two contiguous ranges:

    cycle days  0-6   OUT phase  (7 days)
    cycle days  7-27  IN phase   (21 days)

A phase is a closed tagged union.  ``kind`` is the discriminator, so a
serialised phase always round-trips to the right variant:

    {"kind": "out", "day_index": 3}
    {"kind": "in", "day_index": 10}
    {"kind": "unconfigured"}
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

CYCLE_LENGTH_DAYS = 28
OUT_PHASE_DAYS = 7
IN_PHASE_DAYS = CYCLE_LENGTH_DAYS - OUT_PHASE_DAYS


class OutPhase(BaseModel):
    """OUT phase, ``day_index`` 0-6."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["out"] = "out"
    day_index: int = Field(..., ge=0, lt=OUT_PHASE_DAYS)


class InPhase(BaseModel):
    """IN phase, ``day_index`` 0-20."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["in"] = "in"
    day_index: int = Field(..., ge=0, lt=IN_PHASE_DAYS)


class Unconfigured(BaseModel):
    """No start date has been set yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unconfigured"] = "unconfigured"


CyclePhase = Annotated[Union[OutPhase, InPhase, Unconfigured], Field(discriminator="kind")]


class PhaseDisplay(BaseModel):
    """Everything a front end needs to draw one phase."""

    text: str
    subtitle: str
    border_color: str
    gradient_hsb: tuple[float, float, float]
