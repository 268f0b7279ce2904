"""
Translation record endpoints (manual management and approval).
"""
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from translation_service.core.dependencies import get_translation_manager
from translation_service.schemas.language import CountResponse
from translation_service.schemas.translation import (
    ApproveRequest,
    TranslationCreate,
    TranslationListResponse,
    TranslationResponse,
    TranslationUpdate,
)
from translation_service.services.translation_manager import TranslationManager

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(manager: TranslationManager, value) -> TranslationResponse:
    return TranslationResponse.from_model(value, quality=manager.quality(value))


@router.get("/translations", response_model=TranslationListResponse)
def list_translations(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=1000),
    search: Optional[str] = None,
    manager: TranslationManager = Depends(get_translation_manager)
):
    """
    List translations, newest first.
    
    Args:
        page: Page number (1-based)
        limit: Page size
        search: Substring over original, destination and key
    
    Returns:
        {translations, total}
    """
    values, total = manager.list_paginated(page=page, limit=limit, search=search)
    return TranslationListResponse(
        translations=[_to_response(manager, v) for v in values],
        total=total,
    )


@router.get("/translations/pending", response_model=List[TranslationResponse])
def list_pending_translations(manager: TranslationManager = Depends(get_translation_manager)):
    """Translations waiting for review"""
    return [_to_response(manager, v) for v in manager.get_pending_approvals()]


@router.get("/translations/count", response_model=CountResponse)
def count_translations(manager: TranslationManager = Depends(get_translation_manager)):
    return CountResponse(count=manager.count())


@router.get("/translations/language/{language_code}")
def get_language_map(
    language_code: str,
    manager: TranslationManager = Depends(get_translation_manager)
) -> Dict[str, str]:
    """All translations of one language as {original: destination}"""
    return manager.get_language_map(language_code)


@router.get("/translations/{translation_id}", response_model=TranslationResponse)
def get_translation(
    translation_id: int,
    manager: TranslationManager = Depends(get_translation_manager)
):
    return _to_response(manager, manager.get_by_id(translation_id))


@router.post("/translations", response_model=TranslationResponse, status_code=status.HTTP_201_CREATED)
def create_translation(
    translation_data: TranslationCreate,
    manager: TranslationManager = Depends(get_translation_manager)
):
    """Create a translation record manually"""
    value = manager.create(translation_data.model_dump())
    return _to_response(manager, value)


@router.patch("/translations/{translation_id}", response_model=TranslationResponse)
def update_translation(
    translation_id: int,
    translation_data: TranslationUpdate,
    manager: TranslationManager = Depends(get_translation_manager)
):
    value = manager.update(translation_id, translation_data.model_dump(exclude_unset=True))
    return _to_response(manager, value)


@router.post("/translations/{translation_id}/approve", response_model=TranslationResponse)
def approve_translation(
    translation_id: int,
    approval: ApproveRequest,
    manager: TranslationManager = Depends(get_translation_manager)
):
    """
    Approve translation.
    Approving an already approved translation is rejected with 400.
    """
    value = manager.approve(translation_id, approval.approved_by)
    return _to_response(manager, value)


@router.delete("/translations/{translation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_translation(
    translation_id: int,
    manager: TranslationManager = Depends(get_translation_manager)
):
    manager.delete(translation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
