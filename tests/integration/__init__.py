"""Integration tests for components working together as a system.

Coverage:
    - Full chat turn from input to stored reply
    - PDF upload with real pypdf extraction
    - Host application routes via ASGI transport

The generation API is replaced with httpx.MockTransport; no API key needed.
"""
