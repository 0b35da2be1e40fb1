"""FastAPI host application for the chat UI.

Endpoints:
    - GET /health: Service health status
    - GET /: NiceGUI chat page (mounted in pdfchat.main)
"""

from pdfchat.api.app import app, create_app

__all__ = ["app", "create_app"]
