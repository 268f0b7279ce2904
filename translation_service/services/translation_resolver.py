"""
Translation Resolver - cache-first translation of UI strings.

Flow per text:
    validate -> resolve language -> derive key -> lookup
    hit:  bump usage, return cached destination
    miss: ask backend, store new unapproved record, return backend text

Cache entries are served whether or not they are approved; approval is
only a review signal.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from translation_service.core.config import settings
from translation_service.core.exceptions import BusinessRuleError, ValidationError, raise_if_invalid
from translation_service.core.monitoring import track_error, track_metric
from translation_service.services.cache_store import TranslationCacheStore
from translation_service.services.language_registry import LanguageRegistry
from translation_service.services.translation_backend import (
    PlaceholderTranslationBackend,
    TranslationBackend,
)
from translation_service.services.translation_domain_service import TranslationDomainService

logger = logging.getLogger(__name__)

AUTO_SOURCE_LANGUAGE = "auto"


@dataclass
class TranslationResult:
    text: str
    translated_text: str
    from_cache: bool


class TranslationResolver:
    """
    Resolves translations through the database cache and a translation backend.
    """
    
    def __init__(
        self,
        db: Session,
        backend: Optional[TranslationBackend] = None,
        domain: Optional[TranslationDomainService] = None,
        max_batch_size: Optional[int] = None
    ):
        self.db = db
        self.backend = backend or PlaceholderTranslationBackend()
        self.domain = domain or TranslationDomainService()
        self.store = TranslationCacheStore(db)
        self.languages = LanguageRegistry(db, domain=self.domain)
        self.max_batch_size = max_batch_size or settings.MAX_BATCH_SIZE
    
    def translate(
        self,
        text: Optional[str],
        target_language: Optional[str],
        source_language: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> TranslationResult:
        """
        Translate one text.
        
        Args:
            text: Text to translate (max MAX_TEXT_LENGTH chars)
            target_language: Registered 2-letter language code
            source_language: Source code, "auto" when omitted
            context: Stored with a new record; not part of the cache key
        
        Raises:
            ValidationError: empty/too long text or malformed language code
            NotFoundError: target language not registered
        
        Backend failures propagate to the caller.
        """
        raise_if_invalid(self.domain.validate_translation_request(text, target_language))
        language = self.languages.get_by_code(target_language)
        return self._resolve(text, language.code, target_language, source_language, context)
    
    def _resolve(
        self,
        text: str,
        language_code: str,
        target_language: str,
        source_language: Optional[str],
        context: Optional[Dict[str, Any]]
    ) -> TranslationResult:
        key = self.domain.generate_translation_key(text, language_code)
        
        cached = self.store.find_by_key_and_language(key, language_code)
        if cached:
            destination = cached.destination
            self.store.increment_usage(cached.id)
            track_metric("translation.cache_hit", 1, language_code=language_code)
            return TranslationResult(text=text, translated_text=destination, from_cache=True)
        
        track_metric("translation.cache_miss", 1, language_code=language_code)
        translated_text = self.backend.translate(
            text,
            source_language or AUTO_SOURCE_LANGUAGE,
            target_language,
        )
        
        try:
            self.store.create(
                key=key,
                original=text,
                destination=translated_text,
                language_code=language_code,
                context=context or {},
                is_approved=False,
                usage_count=0,
            )
        except IntegrityError:
            # Another request stored the same (text, language) first
            logger.warning(f"Concurrent insert for key={key} lang={language_code}; keeping existing record")
        
        return TranslationResult(text=text, translated_text=translated_text, from_cache=False)
    
    def translate_batch(
        self,
        texts: List[str],
        target_language: Optional[str],
        source_language: Optional[str] = None
    ) -> List[TranslationResult]:
        """
        Translate texts one by one, in input order.
        
        A failing item never fails the batch: its result echoes the original text
        with from_cache=False.
        
        Raises:
            ValidationError: empty texts list
            BusinessRuleError: more than MAX_BATCH_SIZE texts
            NotFoundError: target language not registered
        """
        if not texts:
            raise ValidationError(["Texts array cannot be empty"])
        if len(texts) > self.max_batch_size:
            raise BusinessRuleError(f"Cannot translate more than {self.max_batch_size} texts at once")
        
        language = self.languages.get_by_code(target_language)
        
        results: List[TranslationResult] = []
        for text in texts:
            try:
                raise_if_invalid(self.domain.validate_translation_request(text, target_language))
                result = self._resolve(text, language.code, target_language, source_language, None)
            except Exception as e:
                self.db.rollback()
                logger.warning(f"Batch item failed, echoing original text: {e}")
                track_error("batch_item_failed", language_code=language.code, metadata={"error": str(e)})
                result = TranslationResult(text=text, translated_text=text, from_cache=False)
            results.append(result)
        
        logger.info(
            f"Batch translated: {len(results)} texts to {language.code}, "
            f"{sum(1 for r in results if r.from_cache)} from cache"
        )
        return results
    
    def get_translation_stats(self, language_code: str) -> Dict[str, Any]:
        """
        Counts for a language.
        
        cache_hit_rate is approved/total as a percentage, rounded to 2 decimals.
        """
        language = self.languages.get_by_code(language_code)
        
        total = self.store.count_by_language(language.code)
        approved = self.store.count_approved_by_language(language.code)
        cache_hit_rate = (approved / total) * 100 if approved > 0 else 0.0
        
        return {
            "total_translations": total,
            "approved_translations": approved,
            "pending_translations": total - approved,
            "cache_hit_rate": round(cache_hit_rate, 2),
        }
