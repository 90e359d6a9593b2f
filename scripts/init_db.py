"""
Database initialization script.

Run this script to create the database tables.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.init_db import init_db
from app.db.session import get_engine

if __name__ == "__main__":
    print("=" * 50)
    print("EcomGo Database Initialization")
    print("=" * 50)
    print()

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    try:
        settings.validate_database()
        init_db(get_engine())
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print("=" * 50)
        sys.exit(0)

    except (ValueError, SQLAlchemyError) as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
