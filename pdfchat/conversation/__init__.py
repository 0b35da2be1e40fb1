"""Conversation state and turn handling.

Responsibilities:
    - Ordered message history with session title and timestamps
    - Immutable state transitions (append, reset, status change)
    - Turn orchestration from user input to assistant reply
"""

from pdfchat.conversation.orchestrator import TurnOrchestrator, TurnState
from pdfchat.conversation.store import ConversationStore

__all__ = ["ConversationStore", "TurnOrchestrator", "TurnState"]
