"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with copy-to-clipboard and status footers
    - File upload interface for PDF attachments
    - Clear conversation and dark/light theme toggle

Delegates all state changes to the conversation and parsing packages.
"""
