"""
Database initialization script.

Run this script to create the shared defaults table in the app group
container.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

from app.core.config import settings
from app.core.logger import setup_logger
from app.db.init_db import init_db

if __name__ == "__main__":
    setup_logger()

    print("=" * 50)
    print("InOut Cycle Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
        print()
        print("=" * 50)
        print(f"SUCCESS: Database initialized at {settings.database_url}")
        print("=" * 50)
        sys.exit(0)

    except Exception as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
