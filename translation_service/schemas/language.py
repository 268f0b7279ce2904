"""
Pydantic schemas for Language API
"""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Dict, Any, List
from datetime import datetime

from translation_service.models.language import Language


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class LanguageCreate(CamelModel):
    """Schema for creating a language. Content rules live in TranslationDomainService."""
    code: Optional[str] = None
    name: Optional[str] = None
    local_name: Optional[str] = None
    flag: Optional[str] = None
    status: Optional[str] = None
    is_default: bool = False
    metadata: Dict[str, Any] = Field(default_factory=dict)


class LanguageUpdate(CamelModel):
    """Schema for updating a language (partial)"""
    name: Optional[str] = None
    local_name: Optional[str] = None
    flag: Optional[str] = None
    status: Optional[str] = None
    is_default: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None


class LanguageResponse(CamelModel):
    """Schema for language response"""
    code: str
    name: str
    local_name: Optional[str] = None
    flag: Optional[str] = None
    status: str
    is_default: bool
    direction: str = "ltr"
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    @classmethod
    def from_model(cls, language: Language) -> "LanguageResponse":
        return cls(
            code=language.code,
            name=language.name,
            local_name=language.local_name,
            flag=language.flag,
            status=language.status,
            is_default=bool(language.is_default),
            direction=language.direction,
            metadata=language.language_metadata or {},
            created_at=language.created_at,
            updated_at=language.updated_at,
        )


class LanguageListResponse(CamelModel):
    languages: List[LanguageResponse]
    total: int


class CountResponse(CamelModel):
    count: int
