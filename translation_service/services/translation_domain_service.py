"""
Translation Domain Service - business rules for languages and translations.

Pure rules only: no database access. Validators collect every violation
and return the list; callers turn a non-empty list into one ValidationError.
"""
import re
from datetime import timedelta
from typing import Any, List, Mapping, Optional

from translation_service.core.config import settings
from translation_service.models.language import Language, LanguageStatus
from translation_service.models.language_value import LanguageValue
from translation_service.utils.keys import generate_translation_key
from translation_service.utils.time import as_utc, utcnow

LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2}$")


def is_valid_language_code(code: Any) -> bool:
    """ISO 639-1 style: two letters, case-insensitive"""
    if not isinstance(code, str):
        return False
    return bool(LANGUAGE_CODE_PATTERN.match(code.lower()))


def _blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


class TranslationDomainService:
    """
    Stateless business rules shared by the registry, the manager and the resolver.
    """
    
    QUALITY_BASE = 50
    QUALITY_APPROVED_BONUS = 30
    QUALITY_USAGE_BONUS = 20
    QUALITY_RECENT_BONUS = 10
    QUALITY_USAGE_THRESHOLD = 10
    QUALITY_RECENT_DAYS = 30
    
    def __init__(
        self,
        max_text_length: Optional[int] = None,
        protected_usage_threshold: Optional[int] = None
    ):
        self.max_text_length = max_text_length or settings.MAX_TEXT_LENGTH
        self.protected_usage_threshold = (
            protected_usage_threshold
            if protected_usage_threshold is not None
            else settings.PROTECTED_USAGE_THRESHOLD
        )
    
    # --- Language rules ---
    
    def validate_language_creation_data(self, data: Mapping[str, Any]) -> List[str]:
        """
        Validate language creation data.
        
        Args:
            data: snake_case fields (code, name, local_name, status, ...)
        
        Returns:
            List of error messages (empty when valid)
        """
        errors: List[str] = []
        
        if not is_valid_language_code(data.get("code")):
            errors.append("Valid language code is required (ISO 639-1 format)")
        
        name = data.get("name")
        if _blank(name) or len(name.strip()) < 2:
            errors.append("Language name must be at least 2 characters")
        elif len(name) > 100:
            errors.append("Language name must not exceed 100 characters")
        
        local_name = data.get("local_name")
        if local_name is not None and local_name != "" and len(local_name.strip()) < 2:
            errors.append("Local name must be at least 2 characters if provided")
        
        status = data.get("status")
        if status is not None and status not in LanguageStatus.ALL:
            errors.append("Status must be 'active' or 'inactive'")
        
        return errors
    
    def validate_language_update_data(self, data: Mapping[str, Any]) -> List[str]:
        """Validate a partial language update; only provided fields are checked."""
        errors: List[str] = []
        
        if "code" in data and not is_valid_language_code(data["code"]):
            errors.append("Language code must be in ISO 639-1 format")
        
        if "name" in data:
            name = data["name"]
            if _blank(name) or len(name.strip()) < 2:
                errors.append("Language name must be at least 2 characters")
            elif len(name) > 100:
                errors.append("Language name must not exceed 100 characters")
        
        local_name = data.get("local_name")
        if local_name and len(local_name.strip()) < 2:
            errors.append("Local name must be at least 2 characters if provided")
        
        if "status" in data and data["status"] not in LanguageStatus.ALL:
            errors.append("Status must be 'active' or 'inactive'")
        
        return errors
    
    def can_delete_language(self, language: Language, has_translations: bool) -> bool:
        """Default language and languages with translations are kept."""
        if language.is_default:
            return False
        if has_translations:
            return False
        return True
    
    # --- Translation rules ---
    
    def _validate_text_field(
        self,
        errors: List[str],
        value: Optional[str],
        label: str,
        empty_message: str
    ) -> None:
        if _blank(value):
            errors.append(empty_message)
        if value and len(value) > self.max_text_length:
            errors.append(f"{label} must not exceed {self.max_text_length} characters")
    
    def validate_translation_creation_data(self, data: Mapping[str, Any]) -> List[str]:
        """
        Validate a manual translation create request.
        
        Returns:
            List of error messages (empty when valid)
        """
        errors: List[str] = []
        
        self._validate_text_field(errors, data.get("original"), "Original text", "Original text is required")
        self._validate_text_field(errors, data.get("destination"), "Translated text", "Translated text is required")
        
        language_code = data.get("language_code")
        if not language_code or not isinstance(language_code, str):
            errors.append("Valid language code is required")
        
        return errors
    
    def validate_translation_update_data(self, data: Mapping[str, Any]) -> List[str]:
        """Validate a partial translation update; only provided fields are checked."""
        errors: List[str] = []
        
        if "original" in data:
            self._validate_text_field(errors, data["original"], "Original text", "Original text cannot be empty")
        if "destination" in data:
            self._validate_text_field(errors, data["destination"], "Translated text", "Translated text cannot be empty")
        
        return errors
    
    def validate_translation_request(
        self,
        text: Optional[str],
        target_language: Optional[str]
    ) -> List[str]:
        """Validate a translate request before any lookup."""
        errors: List[str] = []
        
        if _blank(text):
            errors.append("Text to translate is required")
        if text and len(text) > self.max_text_length:
            errors.append(f"Text to translate must not exceed {self.max_text_length} characters")
        if not is_valid_language_code(target_language):
            errors.append("Valid target language code is required")
        
        return errors
    
    def generate_translation_key(self, text: str, language_code: str) -> str:
        return generate_translation_key(text, language_code)
    
    def can_approve_translation(self, translation: LanguageValue) -> bool:
        """Only pending translations can be approved."""
        return not translation.is_approved
    
    def can_delete_translation(self, translation: LanguageValue) -> bool:
        """Approved translations with high usage are protected."""
        if translation.is_approved and (translation.usage_count or 0) > self.protected_usage_threshold:
            return False
        return True
    
    def calculate_translation_quality(self, translation: LanguageValue) -> int:
        """
        Advisory quality score in [0, 100].
        
        base 50, +30 approved, +20 used more than 10 times, +10 used in the last 30 days
        """
        score = self.QUALITY_BASE
        
        if translation.is_approved:
            score += self.QUALITY_APPROVED_BONUS
        
        if (translation.usage_count or 0) > self.QUALITY_USAGE_THRESHOLD:
            score += self.QUALITY_USAGE_BONUS
        
        if translation.last_used_at:
            age = utcnow() - as_utc(translation.last_used_at)
            if age < timedelta(days=self.QUALITY_RECENT_DAYS):
                score += self.QUALITY_RECENT_BONUS
        
        return min(100, max(0, score))

