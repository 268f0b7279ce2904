"""
API v1 - translation service routes.

Modular structure:
- languages.py: Language registry CRUD
- translations.py: Translation records, approval workflow
- translate.py: Cache-first translate, batch translate, stats
"""
from fastapi import APIRouter

from .languages import router as languages_router
from .translations import router as translations_router
from .translate import router as translate_router

# Main v1 router
router = APIRouter()

router.include_router(languages_router, tags=["languages"])
router.include_router(translations_router, tags=["translations"])
router.include_router(translate_router, tags=["translate"])

__all__ = ["router"]
