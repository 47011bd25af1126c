"""
Rendering surface: print the widget timeline.

Loads the start date from the shared app group store and shows the
phase for today and the following days.

Usage:
    python scripts/show_widget.py
    python scripts/show_widget.py --compact
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from app.core.logger import setup_logger
from app.cycle.display import describe
from app.db.session import engine
from app.services.cycle_service import CycleService

if __name__ == "__main__":
    setup_logger()
    verbose = "--compact" not in sys.argv[1:]

    with Session(engine) as session:
        timeline = CycleService(session).get_timeline()

    print("=" * 60)
    print("InOut Cycle widget")
    print("=" * 60)
    for entry in timeline.entries:
        display = describe(entry.phase, verbose=verbose)
        h, s, b = display.gradient_hsb
        print(f"{entry.date:%a %Y-%m-%d}  {display.text:<8}  {display.subtitle:<24}  "
              f"[{display.border_color}, hsb {h:.2f}/{s:.2f}/{b:.2f}]")
    print()
    print(f"Next reload: {timeline.next_reload_at:%Y-%m-%d %H:%M}")
    print("=" * 60)
