"""
Review Relay - Web Server Entry Point
=====================================

Run this to start the review form server:
    python main.py

Then open http://127.0.0.1:8080 in your browser.

Requires GEMINI_API_KEY; Twilio settings are needed for SMS alerts.
"""

import logging

import uvicorn

from review_relay.infrastructure.config import get_settings


def main():
    """Start the web server."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    settings = get_settings()

    print("\n" + "=" * 50)
    print("   Review Relay - Review Form")
    print("=" * 50)
    print(f"\n   Starting server at http://{settings.server.host}:{settings.server.port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "review_relay.web.app:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
