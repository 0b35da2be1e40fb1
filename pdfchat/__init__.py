"""PDF Chat - a browser chat with Google Gemini and PDF context.

Combines NiceGUI for the interface, httpx for the Gemini API, pypdf for text
extraction, and Pydantic for data validation.

Components:
    - conversation: Session state and turn orchestration
    - gateway: Request formatting and the Gemini HTTP client
    - parsing: PDF extraction and pending attachments
    - ui: Web interface for chat interactions
    - api: FastAPI host application
    - models: Domain and wire schemas
"""

__version__ = "0.1.0"
