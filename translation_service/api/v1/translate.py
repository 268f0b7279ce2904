"""
Translate endpoints - cache-first text translation.

Handlers are plain functions: the resolver and backends are blocking and run
in the FastAPI threadpool.
"""
from fastapi import APIRouter, Depends

from translation_service.core.dependencies import get_translation_resolver
from translation_service.schemas.translation import (
    BatchTranslateRequest,
    BatchTranslateResponse,
    BatchTranslationItem,
    TranslateRequest,
    TranslateResponse,
    TranslationStats,
)
from translation_service.services.translation_resolver import TranslationResolver

router = APIRouter()


@router.post("/translate", response_model=TranslateResponse)
def translate_text(
    request: TranslateRequest,
    resolver: TranslationResolver = Depends(get_translation_resolver)
):
    """
    Translate one text.
    
    Returns:
        {translatedText, fromCache}
    """
    result = resolver.translate(
        request.text,
        request.target_language,
        source_language=request.source_language,
        context=request.context,
    )
    return TranslateResponse(translated_text=result.translated_text, from_cache=result.from_cache)


@router.post("/translate/batch", response_model=BatchTranslateResponse)
def translate_batch(
    request: BatchTranslateRequest,
    resolver: TranslationResolver = Depends(get_translation_resolver)
):
    """
    Translate up to 100 texts. Results keep input order; failed items echo the input.
    """
    results = resolver.translate_batch(
        request.texts,
        request.target_language,
        source_language=request.source_language,
    )
    return BatchTranslateResponse(translations=[
        BatchTranslationItem(text=r.text, translated_text=r.translated_text, from_cache=r.from_cache)
        for r in results
    ])


@router.get("/stats/{language_code}", response_model=TranslationStats)
def get_translation_stats(
    language_code: str,
    resolver: TranslationResolver = Depends(get_translation_resolver)
):
    return TranslationStats(**resolver.get_translation_stats(language_code))
