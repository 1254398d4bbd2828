"""Route handlers for httpspell."""

from httpspell.routes.spell import router as spell_router
from httpspell.routes.static import router as static_router

__all__ = [
    "spell_router",
    "static_router",
]
