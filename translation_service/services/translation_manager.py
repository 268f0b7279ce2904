"""
Translation Manager - manual CRUD and the approval lifecycle of cache records.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from translation_service.core.exceptions import (
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    raise_if_invalid,
)
from translation_service.models.language_value import LanguageValue
from translation_service.services.cache_store import TranslationCacheStore
from translation_service.services.language_registry import LanguageRegistry
from translation_service.services.translation_domain_service import TranslationDomainService
from translation_service.utils.time import utcnow

logger = logging.getLogger(__name__)


class TranslationManager:
    """
    Create/update/approve/delete for translation records.
    """
    
    def __init__(self, db: Session, domain: Optional[TranslationDomainService] = None):
        self.db = db
        self.domain = domain or TranslationDomainService()
        self.store = TranslationCacheStore(db)
        self.languages = LanguageRegistry(db, domain=self.domain)
    
    def get_by_id(self, value_id: int) -> LanguageValue:
        value = self.store.find_by_id(value_id)
        if not value:
            raise NotFoundError("Translation not found")
        return value
    
    def quality(self, value: LanguageValue) -> int:
        return self.domain.calculate_translation_quality(value)
    
    def list_paginated(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None
    ) -> Tuple[List[LanguageValue], int]:
        return self.store.find_paginated(page=page, limit=limit, search=search)
    
    def get_pending_approvals(self) -> List[LanguageValue]:
        return self.store.find_pending_approval()
    
    def count(self) -> int:
        return self.store.count()
    
    def get_language_map(self, language_code: str) -> Dict[str, str]:
        """
        All translations of a language as {original: destination}.
        Useful for bulk loading UI strings.
        """
        self.languages.get_by_code(language_code)
        return {v.original: v.destination for v in self.store.find_by_language(language_code)}
    
    def create(self, data: Dict[str, Any]) -> LanguageValue:
        """
        Create a translation record manually.
        
        Args:
            data: original, destination, language_code, context, is_approved, approved_by
                (a record created approved is stamped with approved_at)
        
        Raises:
            ValidationError: invalid fields
            NotFoundError: unknown language
            ConflictError: a record for (original, language) already exists
        """
        raise_if_invalid(self.domain.validate_translation_creation_data(data))
        
        language_code = self.languages.get_by_code(data["language_code"]).code
        
        key = self.domain.generate_translation_key(data["original"], language_code)
        if self.store.find_by_key_and_language(key, language_code):
            raise ConflictError("Translation already exists")
        
        is_approved = bool(data.get("is_approved"))
        
        try:
            value = self.store.create(
                key=key,
                original=data["original"],
                destination=data["destination"],
                language_code=language_code,
                context=data.get("context") or {},
                is_approved=is_approved,
                approved_by=data.get("approved_by") if is_approved else None,
                approved_at=utcnow() if is_approved else None,
                usage_count=0,
            )
        except IntegrityError:
            raise ConflictError("Translation already exists")
        
        logger.info(f"Translation created: id={value.id} lang={language_code}")
        return value
    
    def update(self, value_id: int, patch: Dict[str, Any]) -> LanguageValue:
        """
        Apply a partial update. Changing the original re-derives the key.
        
        Raises:
            NotFoundError: unknown translation
            ValidationError: invalid fields
            ConflictError: the new original collides with another record
        """
        value = self.get_by_id(value_id)
        raise_if_invalid(self.domain.validate_translation_update_data(patch))
        
        changes = {k: v for k, v in patch.items() if k in ("original", "destination", "context")}
        
        if "original" in changes and changes["original"] != value.original:
            key = self.domain.generate_translation_key(changes["original"], value.language_code)
            existing = self.store.find_by_key_and_language(key, value.language_code)
            if existing and existing.id != value.id:
                raise ConflictError("Translation already exists")
            changes["key"] = key
        
        try:
            return self.store.update(value, changes)
        except IntegrityError:
            raise ConflictError("Translation already exists")
    
    def approve(self, value_id: int, approved_by: str) -> LanguageValue:
        """
        Mark a translation as reviewed. Approving twice is rejected.
        
        Raises:
            NotFoundError: unknown translation
            BusinessRuleError: already approved
        """
        value = self.get_by_id(value_id)
        if not self.domain.can_approve_translation(value):
            raise BusinessRuleError("Translation is already approved")
        
        value = self.store.update(value, {
            "is_approved": True,
            "approved_by": approved_by,
            "approved_at": utcnow(),
        })
        logger.info(f"Translation approved: id={value_id} by={approved_by}")
        return value
    
    def delete(self, value_id: int) -> None:
        """
        Raises:
            NotFoundError: unknown translation
            BusinessRuleError: approved and heavily used
        """
        value = self.get_by_id(value_id)
        if not self.domain.can_delete_translation(value):
            raise BusinessRuleError("Cannot delete approved translation with high usage count")
        
        self.store.delete(value)
        logger.info(f"Translation deleted: id={value_id}")
