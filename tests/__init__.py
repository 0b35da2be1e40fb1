"""Test package for PDF Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: Cross-module workflows (real pypdf, mocked network)

Sample PDFs are generated in conftest.py. Leverages pytest with pytest-check
for soft assertions.
"""
