"""
Translation Cache Store - persistence for LanguageValue records.

All reads and writes of the language_values table go through here.
Writes commit immediately; each call is its own unit of work.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from translation_service.models.language_value import LanguageValue
from translation_service.utils.time import utcnow

logger = logging.getLogger(__name__)


class TranslationCacheStore:
    """Repository over the translation cache table"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def find_by_id(self, value_id: int) -> Optional[LanguageValue]:
        return self.db.query(LanguageValue).filter(LanguageValue.id == value_id).first()
    
    def find_by_key_and_language(self, key: str, language_code: str) -> Optional[LanguageValue]:
        return self.db.query(LanguageValue).filter(
            LanguageValue.key == key,
            LanguageValue.language_code == language_code
        ).first()
    
    def find_by_language(self, language_code: str) -> List[LanguageValue]:
        return self.db.query(LanguageValue).filter(
            LanguageValue.language_code == language_code
        ).order_by(LanguageValue.id).all()
    
    def find_pending_approval(self) -> List[LanguageValue]:
        return self.db.query(LanguageValue).filter(
            LanguageValue.is_approved.is_(False)
        ).order_by(LanguageValue.id).all()
    
    def create(self, **fields: Any) -> LanguageValue:
        """
        Insert a new record.
        
        Raises:
            sqlalchemy.exc.IntegrityError: (key, language_code) already stored
        """
        value = LanguageValue(**fields)
        self.db.add(value)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(value)
        return value
    
    def update(self, value: LanguageValue, patch: Dict[str, Any]) -> LanguageValue:
        for field, field_value in patch.items():
            setattr(value, field, field_value)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(value)
        return value
    
    def delete(self, value: LanguageValue) -> None:
        self.db.delete(value)
        self.db.commit()
    
    def increment_usage(self, value_id: int) -> None:
        """
        Bump usage_count and last_used_at in a single UPDATE statement.
        
        The increment is evaluated by the database, so concurrent hits
        on the same record never lose counts.
        """
        self.db.execute(
            update(LanguageValue)
            .where(LanguageValue.id == value_id)
            .values(
                usage_count=LanguageValue.usage_count + 1,
                last_used_at=utcnow(),
            )
        )
        self.db.commit()
    
    def count(self) -> int:
        return self.db.query(func.count(LanguageValue.id)).scalar() or 0
    
    def count_by_language(self, language_code: str) -> int:
        return self.db.query(func.count(LanguageValue.id)).filter(
            LanguageValue.language_code == language_code
        ).scalar() or 0
    
    def count_approved_by_language(self, language_code: str) -> int:
        return self.db.query(func.count(LanguageValue.id)).filter(
            LanguageValue.language_code == language_code,
            LanguageValue.is_approved.is_(True)
        ).scalar() or 0
    
    def has_translations(self, language_code: str) -> bool:
        return self.count_by_language(language_code) > 0
    
    def _search_filter(self, query: str):
        pattern = f"%{query}%"
        return or_(
            LanguageValue.original.ilike(pattern),
            LanguageValue.destination.ilike(pattern),
            LanguageValue.key.ilike(pattern),
        )
    
    def search(self, query: str) -> List[LanguageValue]:
        """Case-insensitive substring match over original, destination and key"""
        return self.db.query(LanguageValue).filter(
            self._search_filter(query)
        ).order_by(LanguageValue.id).all()
    
    def find_paginated(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None
    ) -> Tuple[List[LanguageValue], int]:
        """
        Page of records, newest first.
        
        Returns:
            (records, total matching records)
        """
        query = self.db.query(LanguageValue)
        if search:
            query = query.filter(self._search_filter(search))
        
        total = query.count()
        values = (
            query.order_by(LanguageValue.created_at.desc(), LanguageValue.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return values, total
