"""
SQLAlchemy models
"""
from translation_service.models.language import Language, LanguageStatus
from translation_service.models.language_value import LanguageValue

__all__ = [
    "Language",
    "LanguageStatus",
    "LanguageValue",
]

# Import Base for Alembic
from translation_service.core.database import Base
