"""FastAPI API endpoints under /api.

Endpoint groups: health and settings, psyche (catalog, build, statuses,
detection), voices (narrative pass, ad hoc check). Every handler reads the
live state from request.app.state and persists it after mutating.
"""

from fastapi import APIRouter

from .psyche import router as psyche_router
from .settings import router as settings_router
from .voices import router as voices_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(psyche_router)
router.include_router(voices_router)
