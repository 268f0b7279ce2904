"""
Language model - languages available for UI translation
"""
from sqlalchemy import Column, String, Boolean, DateTime, JSON, Index
from sqlalchemy.sql import func

from translation_service.core.database import Base


class LanguageStatus:
    ACTIVE = "active"
    INACTIVE = "inactive"
    
    ALL = (ACTIVE, INACTIVE)


class Language(Base):
    """Language registry entry. The code is the primary key."""
    
    __tablename__ = "languages"
    
    code = Column(String(5), primary_key=True)  # en, es, fr, ar
    name = Column(String(100), nullable=False)
    local_name = Column(String(100), nullable=True)  # Español, Français
    flag = Column(String(10), nullable=True)  # display glyph
    status = Column(String(10), nullable=False, default=LanguageStatus.ACTIVE)
    is_default = Column(Boolean, nullable=False, default=False)
    # direction (ltr/rtl), region, currency, dateFormat
    language_metadata = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    __table_args__ = (
        Index("idx_languages_status", "status"),
        Index("idx_languages_is_default", "is_default"),
    )
    
    @property
    def direction(self) -> str:
        return (self.language_metadata or {}).get("direction", "ltr")
    
    def __repr__(self):
        return f"<Language(code={self.code}, name={self.name}, default={self.is_default})>"
