"""
Development server launcher.

Runs the FastAPI app with uvicorn in reload mode on the configured port.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from app.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    print("=" * 60)
    print("EcomGo Development Server")
    print("=" * 60)
    print()
    print(f"API: http://localhost:{settings.SERVER_PORT}")
    print(f"Docs: http://localhost:{settings.SERVER_PORT}/docs")
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("app.main:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT, reload=True,
                log_level=settings.LOG_LEVEL.lower())
