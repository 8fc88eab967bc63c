"""
Project Reports Portal - Web Server Entry Point
===============================================

Run this to start the server:
    python main.py

Then open http://127.0.0.1:3000 in your browser (PORT overrides the port).
"""

import uvicorn

from project_reports.infrastructure.config import get_settings


def main():
    """Start the web server."""
    settings = get_settings()

    print("\n" + "=" * 50)
    print("   Project Reports Portal")
    print("=" * 50)
    print(f"\n   Starting server at http://{settings.host}:{settings.port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "project_reports.web.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
