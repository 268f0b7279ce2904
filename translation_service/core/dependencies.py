"""
FastAPI dependencies wiring services to the request's database session
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from translation_service.core.database import get_db
from translation_service.services.language_registry import LanguageRegistry
from translation_service.services.translation_backend import (
    TranslationBackend,
    get_translation_backend,
)
from translation_service.services.translation_manager import TranslationManager
from translation_service.services.translation_resolver import TranslationResolver


def get_language_registry(db: Session = Depends(get_db)) -> LanguageRegistry:
    return LanguageRegistry(db)


def get_translation_manager(db: Session = Depends(get_db)) -> TranslationManager:
    return TranslationManager(db)


def get_translation_resolver(
    db: Session = Depends(get_db),
    backend: TranslationBackend = Depends(get_translation_backend)
) -> TranslationResolver:
    return TranslationResolver(db, backend=backend)
