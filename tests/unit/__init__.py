"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and status transitions
    - parsing/: Text extraction and upload validation
    - gateway/: Configuration, request formatting and the HTTP client
    - conversation/: Store transitions and turn orchestration

Uses mocks for collaborators when needed. Leverages pytest-check for
multiple assertions per test.
"""
