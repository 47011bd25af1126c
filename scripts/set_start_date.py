"""
Configuration surface: set the cycle start date.

Saves the date in the shared app group store and asks the widget to
rebuild its timeline.

Usage:
    python scripts/set_start_date.py 2026-10-01
    python scripts/set_start_date.py            # today
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from app.core.exceptions import SharedStoreUnavailableError
from app.core.logger import setup_logger
from app.cycle.display import describe
from app.db.init_db import init_db
from app.db.session import engine
from app.services.cycle_service import CycleService

if __name__ == "__main__":
    setup_logger()

    if len(sys.argv) > 1:
        try:
            start_date = datetime.date.fromisoformat(sys.argv[1])
        except ValueError:
            print(f"Invalid date '{sys.argv[1]}', expected YYYY-MM-DD")
            sys.exit(2)
    else:
        start_date = datetime.date.today()

    init_db()

    with Session(engine) as session:
        try:
            phase = CycleService(session).set_start_date(start_date)
        except SharedStoreUnavailableError as e:
            print(f"✗ {e}")
            sys.exit(1)

    display = describe(phase)
    print("=" * 50)
    print(f"Cycle start date: {start_date.isoformat()}")
    print("OUT 7 days → IN 21 days → repeat")
    print()
    print(f"Current status: {display.text}")
    print(f"  {display.subtitle}")
    print("=" * 50)
