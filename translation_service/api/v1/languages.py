"""
Language endpoints.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from translation_service.core.dependencies import get_language_registry, get_translation_manager
from translation_service.schemas.language import (
    CountResponse,
    LanguageCreate,
    LanguageListResponse,
    LanguageResponse,
    LanguageUpdate,
)
from translation_service.services.language_registry import LanguageRegistry
from translation_service.services.translation_manager import TranslationManager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/languages", response_model=LanguageListResponse)
def list_languages(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=1000),
    search: Optional[str] = None,
    registry: LanguageRegistry = Depends(get_language_registry)
):
    """
    List languages with pagination and optional search.
    
    Args:
        page: Page number (1-based)
        limit: Page size
        search: Substring over name, local name and code
    
    Returns:
        {languages, total}
    """
    languages, total = registry.list_paged(page=page, limit=limit, search=search)
    return LanguageListResponse(
        languages=[LanguageResponse.from_model(l) for l in languages],
        total=total,
    )


@router.get("/languages/active")
def list_active_languages(
    registry: LanguageRegistry = Depends(get_language_registry)
) -> List[Dict[str, Any]]:
    """Active languages (cached)"""
    return registry.get_active_languages()


@router.get("/languages/count", response_model=CountResponse)
def count_languages(registry: LanguageRegistry = Depends(get_language_registry)):
    return CountResponse(count=registry.count())


@router.get("/languages/code/{code}", response_model=LanguageResponse)
def get_language_by_code(code: str, registry: LanguageRegistry = Depends(get_language_registry)):
    return LanguageResponse.from_model(registry.get_by_code(code))


@router.get("/languages/{code}", response_model=LanguageResponse)
def get_language(code: str, registry: LanguageRegistry = Depends(get_language_registry)):
    return LanguageResponse.from_model(registry.get_by_id(code))


@router.post("/languages", response_model=LanguageResponse, status_code=status.HTTP_201_CREATED)
def create_language(
    language_data: LanguageCreate,
    registry: LanguageRegistry = Depends(get_language_registry)
):
    """
    Create new language.
    Setting isDefault moves the default flag from the previous default language.
    """
    language = registry.create(language_data.model_dump())
    return LanguageResponse.from_model(language)


@router.patch("/languages/{code}", response_model=LanguageResponse)
def update_language(
    code: str,
    language_data: LanguageUpdate,
    registry: LanguageRegistry = Depends(get_language_registry)
):
    language = registry.update(code, language_data.model_dump(exclude_unset=True))
    return LanguageResponse.from_model(language)


@router.delete("/languages/{code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_language(
    code: str,
    registry: LanguageRegistry = Depends(get_language_registry),
    manager: TranslationManager = Depends(get_translation_manager)
):
    """
    Delete language.
    Refused for the default language and for languages that still have translations.
    """
    registry.delete(code, has_translations=manager.store.has_translations(code))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
