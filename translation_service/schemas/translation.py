"""
Pydantic schemas for translation records and translate requests
"""
from pydantic import Field
from typing import Optional, Dict, Any, List
from datetime import datetime

from translation_service.models.language_value import LanguageValue
from translation_service.schemas.language import CamelModel


class TranslationCreate(CamelModel):
    """Schema for creating a translation record manually"""
    original: Optional[str] = None
    destination: Optional[str] = None
    language_code: Optional[str] = None
    context: Optional[Dict[str, Any]] = None
    is_approved: bool = False
    approved_by: Optional[str] = None


class TranslationUpdate(CamelModel):
    """Schema for updating a translation record (partial)"""
    original: Optional[str] = None
    destination: Optional[str] = None
    context: Optional[Dict[str, Any]] = None


class ApproveRequest(CamelModel):
    approved_by: str = Field(..., min_length=1)


class TranslationResponse(CamelModel):
    """Schema for translation record response"""
    id: int
    key: str
    original: str
    destination: str
    language_code: str
    context: Optional[Dict[str, Any]] = None
    is_approved: bool
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    usage_count: int
    last_used_at: Optional[datetime] = None
    quality: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    @classmethod
    def from_model(cls, value: LanguageValue, quality: int) -> "TranslationResponse":
        return cls(
            id=value.id,
            key=value.key,
            original=value.original,
            destination=value.destination,
            language_code=value.language_code,
            context=value.context,
            is_approved=bool(value.is_approved),
            approved_by=value.approved_by,
            approved_at=value.approved_at,
            usage_count=value.usage_count or 0,
            last_used_at=value.last_used_at,
            quality=quality,
            created_at=value.created_at,
            updated_at=value.updated_at,
        )


class TranslationListResponse(CamelModel):
    translations: List[TranslationResponse]
    total: int


class TranslateRequest(CamelModel):
    """POST /translate body"""
    text: Optional[str] = None
    target_language: Optional[str] = None
    source_language: Optional[str] = None
    context: Optional[Dict[str, Any]] = None


class TranslateResponse(CamelModel):
    translated_text: str
    from_cache: bool


class BatchTranslateRequest(CamelModel):
    """POST /translate/batch body"""
    texts: List[str] = Field(default_factory=list)
    target_language: Optional[str] = None
    source_language: Optional[str] = None


class BatchTranslationItem(CamelModel):
    text: str
    translated_text: str
    from_cache: bool


class BatchTranslateResponse(CamelModel):
    translations: List[BatchTranslationItem]


class TranslationStats(CamelModel):
    total_translations: int
    approved_translations: int
    pending_translations: int
    cache_hit_rate: float
