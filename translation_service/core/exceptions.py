"""
Service error types.

Every failure the domain layer reports is one of the four subclasses of
TranslationServiceError; the API layer maps them to HTTP responses in one place.
"""
from typing import List, Optional


class TranslationServiceError(Exception):
    """Base class for expected, client-facing failures"""
    
    status_code = 500
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
    
    def to_dict(self) -> dict:
        return {
            "error": type(self).__name__,
            "message": self.message,
        }


class ValidationError(TranslationServiceError):
    """Structural or business validation failed (all messages collected)"""
    
    status_code = 400
    
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(", ".join(self.errors))
    
    def to_dict(self) -> dict:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class NotFoundError(TranslationServiceError):
    """Language or translation does not exist"""
    
    status_code = 404


class ConflictError(TranslationServiceError):
    """Duplicate language code or pre-existing identical translation"""
    
    status_code = 409


class BusinessRuleError(TranslationServiceError):
    """Operation is structurally valid but disallowed by a business rule"""
    
    status_code = 400


def raise_if_invalid(errors: Optional[List[str]]) -> None:
    """Raise ValidationError when the collected error list is not empty."""
    if errors:
        raise ValidationError(errors)
