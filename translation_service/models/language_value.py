"""
LanguageValue model - one cached translation per (text, language)
"""
from sqlalchemy import (
    Column, Integer, String, Text, Boolean, DateTime, JSON, ForeignKey, Index, UniqueConstraint
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from translation_service.core.database import Base


class LanguageValue(Base):
    """Translation cache record"""
    
    __tablename__ = "language_values"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(32), nullable=False)  # md5(original.strip() + "_" + language_code)
    original = Column(Text, nullable=False)
    destination = Column(Text, nullable=False)
    language_code = Column(String(5), ForeignKey("languages.code"), nullable=False)
    context = Column(JSON, nullable=True)  # category/module/component/field, not part of key
    is_approved = Column(Boolean, nullable=False, default=False)
    approved_by = Column(String(100), nullable=True)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    usage_count = Column(Integer, nullable=False, default=0)
    last_used_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    language = relationship("Language", backref="values")
    
    # One translation per key per language
    __table_args__ = (
        UniqueConstraint("key", "language_code", name="uq_language_value_key_lang"),
        Index("idx_language_values_language_code", "language_code"),
        Index("idx_language_values_is_approved", "is_approved"),
        Index("idx_language_values_usage_count", "usage_count"),
    )
    
    def __repr__(self):
        return f"<LanguageValue(id={self.id}, key={self.key}, lang={self.language_code})>"
