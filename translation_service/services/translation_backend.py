"""
Translation backends - the machine translation integration point.

The placeholder backend is the default. LibreTranslateBackend talks to a
LibreTranslate-compatible HTTP API.
"""
import logging
from abc import ABC, abstractmethod

import httpx

from translation_service.core.config import settings
from translation_service.core.monitoring import monitor_performance

logger = logging.getLogger(__name__)

# Shared HTTP connection pool for remote backends
http_client = httpx.Client(timeout=settings.TRANSLATION_BACKEND_TIMEOUT)


class TranslationBackendError(Exception):
    """Backend could not produce a translation"""


class TranslationBackend(ABC):
    """Collaborator interface: (text, source, target) -> translated text"""
    
    name = "base"
    
    @abstractmethod
    def translate(self, text: str, source_language: str, target_language: str) -> str:
        ...


class PlaceholderTranslationBackend(TranslationBackend):
    """
    Stub backend: prefixes the text with the upper-cased target code.
    
    "Welcome" -> es => "[ES] Welcome"
    """
    
    name = "placeholder"
    
    @monitor_performance
    def translate(self, text: str, source_language: str, target_language: str) -> str:
        logger.debug(f'Translating "{text}" from {source_language} to {target_language}')
        return f"[{target_language.upper()}] {text}"


class LibreTranslateBackend(TranslationBackend):
    """LibreTranslate-compatible HTTP backend"""
    
    name = "libretranslate"
    
    def __init__(self, base_url: str, timeout: float = 3.0, client: httpx.Client | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or http_client
    
    @monitor_performance
    def translate(self, text: str, source_language: str, target_language: str) -> str:
        payload = {
            "q": text,
            "source": source_language,
            "target": target_language,
            "format": "text",
        }
        
        try:
            response = self._client.post(f"{self.base_url}/translate", json=payload, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TranslationBackendError(f"Translation backend request failed: {e}") from e
        
        translated = response.json().get("translatedText")
        if not translated:
            raise TranslationBackendError("Translation backend returned no text")
        return translated


def get_translation_backend() -> TranslationBackend:
    """
    Backend selected by TRANSLATION_BACKEND.
    Use as FastAPI dependency; tests override it.
    """
    if settings.TRANSLATION_BACKEND == LibreTranslateBackend.name:
        return LibreTranslateBackend(
            settings.TRANSLATION_BACKEND_URL,
            timeout=settings.TRANSLATION_BACKEND_TIMEOUT,
        )
    return PlaceholderTranslationBackend()
