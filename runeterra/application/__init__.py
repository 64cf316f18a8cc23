"""Application layer services."""

from .assistant_service import AssistantService, MentionCooldown
from .intent import IntentClassifier
from .schemas import AnswerResponse, AskRequest, MentionRequest, MentionResponse

__all__ = [
    "AssistantService",
    "MentionCooldown",
    "IntentClassifier",
    "AnswerResponse",
    "AskRequest",
    "MentionRequest",
    "MentionResponse",
]
