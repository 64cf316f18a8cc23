from .assistant import router as assistant_router
from .system import router as system_router

__all__ = [
    "assistant_router",
    "system_router",
]
