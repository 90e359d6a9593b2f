"""
Run Alembic migrations against the configured database.

Usage:
    python scripts/migrate.py up
    python scripts/migrate.py down
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from alembic import command
from alembic.config import Config

from app.core.config import get_settings

if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in ("up", "down"):
        print(__doc__)
        sys.exit(2)

    settings = get_settings()
    print(f"Running migrations for {settings.DB_TYPE} database...")

    config = Config(str(project_root / "alembic.ini"))
    config.set_main_option("script_location", str(project_root / "alembic"))
    if sys.argv[1] == "up":
        command.upgrade(config, "head")
    else:
        command.downgrade(config, "-1")
