"""Wire models for the Gemini ``generateContent`` endpoint."""

from typing import Literal

from pydantic import BaseModel, Field


class Part(BaseModel):
    """A single text part of a content entry."""

    text: str


class Content(BaseModel):
    """One conversation turn in the request body.

    Attributes:
        role: ``user`` for user turns, ``model`` for assistant turns.
        parts: Text parts of the turn.
    """

    role: Literal["user", "model"]
    parts: list[Part]


class GenerateContentRequest(BaseModel):
    """Request body sent to the generation endpoint."""

    contents: list[Content] = Field(default_factory=list)


class CandidateContent(BaseModel):
    parts: list[Part] = Field(..., min_length=1)


class Candidate(BaseModel):
    content: CandidateContent


class GenerateContentResponse(BaseModel):
    """Response envelope; only the fields the client reads are modelled."""

    candidates: list[Candidate] = Field(..., min_length=1)

    @property
    def text(self) -> str:
        """Text of the first part of the first candidate."""
        return self.candidates[0].content.parts[0].text
