"""
Language Registry - languages available for translation.

Owns the "at most one default language" rule. The default swap (clear old
default, write new one) is flushed and committed together, so readers never
see zero defaults between the two writes.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from translation_service.core.config import settings
from translation_service.core.exceptions import (
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    raise_if_invalid,
)
from translation_service.core.redis import RedisCache, cache as default_cache
from translation_service.models.language import Language, LanguageStatus
from translation_service.schemas.language import LanguageResponse
from translation_service.services.translation_domain_service import TranslationDomainService

logger = logging.getLogger(__name__)

ACTIVE_LANGUAGES_CACHE_KEY = "languages:active"
LANGUAGES_CACHE_PATTERN = "languages:*"


class LanguageRegistry:
    """CRUD over languages with default-language bookkeeping"""
    
    def __init__(
        self,
        db: Session,
        domain: Optional[TranslationDomainService] = None,
        cache: Optional[RedisCache] = None
    ):
        self.db = db
        self.domain = domain or TranslationDomainService()
        self.cache = cache or default_cache
    
    # --- Reads ---
    
    def find_by_code(self, code: str) -> Optional[Language]:
        if isinstance(code, str):
            code = code.lower()
        return self.db.query(Language).filter(Language.code == code).first()
    
    def get_by_code(self, code: str) -> Language:
        """
        Get language by code.
        
        Raises:
            NotFoundError: language is not registered
        """
        language = self.find_by_code(code)
        if not language:
            raise NotFoundError(f"Language {code} not found")
        return language
    
    # The code is the primary key, so lookup by id is lookup by code.
    get_by_id = get_by_code
    
    def find_default(self) -> Optional[Language]:
        return self.db.query(Language).filter(Language.is_default.is_(True)).first()
    
    def list_active(self) -> List[Language]:
        return self.db.query(Language).filter(
            Language.status == LanguageStatus.ACTIVE
        ).order_by(Language.code).all()
    
    def get_active_languages(self) -> List[Dict[str, Any]]:
        """
        Active languages as response dicts, served from Redis when available.
        
        Returns:
            List of camelCase language dicts
        """
        cached = self.cache.get(ACTIVE_LANGUAGES_CACHE_KEY)
        if cached is not None:
            logger.debug(f"Cache HIT: {ACTIVE_LANGUAGES_CACHE_KEY}")
            return cached
        
        languages = [
            LanguageResponse.from_model(language).model_dump(mode="json", by_alias=True)
            for language in self.list_active()
        ]
        self.cache.set(ACTIVE_LANGUAGES_CACHE_KEY, languages, ttl=settings.LANGUAGE_CACHE_TTL)
        return languages
    
    def list_paged(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None
    ) -> Tuple[List[Language], int]:
        """
        Page of languages, newest first.
        
        Returns:
            (languages, total matching languages)
        """
        query = self.db.query(Language)
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(
                Language.name.ilike(pattern),
                Language.local_name.ilike(pattern),
                Language.code.ilike(pattern),
            ))
        
        total = query.count()
        languages = (
            query.order_by(Language.created_at.desc(), Language.code)
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return languages, total
    
    def search(self, query: str) -> List[Language]:
        languages, _ = self.list_paged(page=1, limit=1000, search=query)
        return languages
    
    def count(self) -> int:
        return self.db.query(func.count(Language.code)).scalar() or 0
    
    # --- Writes ---
    
    def _clear_default(self, keep_code: Optional[str] = None) -> None:
        """Unset the current default (not committed; part of the caller's unit of work)"""
        current = self.find_default()
        if current and current.code != keep_code:
            logger.info(f"Default language moves away from {current.code}")
            current.is_default = False
    
    def _commit(self, language: Language) -> Language:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Language with code {language.code} already exists")
        self.db.refresh(language)
        self.cache.delete_pattern(LANGUAGES_CACHE_PATTERN)
        return language
    
    def create(self, data: Dict[str, Any]) -> Language:
        """
        Register a new language.
        
        Args:
            data: snake_case fields (code, name, local_name, flag, status, is_default, metadata)
        
        Raises:
            ValidationError: invalid fields
            ConflictError: code already registered
        """
        raise_if_invalid(self.domain.validate_language_creation_data(data))
        
        # Codes are stored lower-case
        code = data["code"].lower()
        if self.find_by_code(code):
            raise ConflictError(f"Language with code {code} already exists")
        
        is_default = bool(data.get("is_default"))
        if is_default:
            self._clear_default()
        
        language = Language(
            code=code,
            name=data["name"],
            local_name=data.get("local_name") or data["name"],
            flag=data.get("flag"),
            status=data.get("status") or LanguageStatus.ACTIVE,
            is_default=is_default,
            language_metadata=data.get("metadata") or {},
        )
        self.db.add(language)
        language = self._commit(language)
        
        logger.info(f"Language created: {language.code} (default={language.is_default})")
        return language
    
    def update(self, code: str, patch: Dict[str, Any]) -> Language:
        """
        Apply a partial update.
        
        Args:
            code: Language code
            patch: Only the fields to change (snake_case)
        
        Raises:
            NotFoundError: language is not registered
            ValidationError: invalid fields
        """
        language = self.get_by_code(code)
        raise_if_invalid(self.domain.validate_language_update_data(patch))
        
        if patch.get("is_default"):
            self._clear_default(keep_code=code)
        
        for field in ("name", "local_name", "flag", "status", "is_default"):
            if field in patch and patch[field] is not None:
                setattr(language, field, patch[field])
        if patch.get("metadata") is not None:
            language.language_metadata = {**(language.language_metadata or {}), **patch["metadata"]}
        
        language = self._commit(language)
        logger.info(f"Language updated: {code} fields={sorted(patch)}")
        return language
    
    def delete(self, code: str, has_translations: bool) -> None:
        """
        Remove a language.
        
        Args:
            code: Language code
            has_translations: Supplied by the caller; the registry does not look at translations
        
        Raises:
            NotFoundError: language is not registered
            BusinessRuleError: language is the default or still has translations
        """
        language = self.get_by_code(code)
        if not self.domain.can_delete_language(language, has_translations):
            raise BusinessRuleError(
                "Cannot delete default language or language with existing translations"
            )
        
        self.db.delete(language)
        self.db.commit()
        self.cache.delete_pattern(LANGUAGES_CACHE_PATTERN)
        logger.info(f"Language deleted: {code}")
