"""Request and response schemas for the HTTP surface."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from runeterra.data.entities import Answer, EntityType


class AskRequest(BaseModel):
    """Free-text question."""

    query: str = Field(..., description="Question, e.g. 'quem é jinx'")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Query must not be empty")
        return v


class MentionRequest(BaseModel):
    """A chat message addressed to the bot via a mention marker."""

    user_id: str = Field(..., min_length=1, description="Author identifier, used for the cooldown")
    content: str = Field(..., description="Raw message content, mention markers included")
    bot_id: str | None = Field(default=None, description="Bot user id; without it every mention marker is stripped")


class AnswerResponse(BaseModel):
    text: str
    source_type: EntityType | None = None
    found: bool = False

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerResponse":
        return cls(text=answer.text, source_type=answer.source_type, found=answer.found)


class MentionResponse(BaseModel):
    dropped: bool = False
    answer: AnswerResponse | None = None
