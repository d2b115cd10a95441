"""맞춤법 사전 관리 API 라우터."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from lyrics_spellcheck.core.models.api import SpellcheckTermDTO, SpellcheckTermUpsertDTO
from lyrics_spellcheck.domain.spellcheck import SpellcheckTermRecord
from lyrics_spellcheck.infrastructure.database.connection import get_db
from lyrics_spellcheck.services.spellcheck_term_service import (
    SpellcheckTermNotFoundError,
    SpellcheckTermService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/spellcheck/terms", tags=["spellcheck-terms"])


def _to_dto(record: SpellcheckTermRecord) -> SpellcheckTermDTO:
    return SpellcheckTermDTO(**record.model_dump())


@router.get(
    "",
    response_model=list[SpellcheckTermDTO],
    summary="교정어 목록",
    description="맞춤법 사전에 등록된 모든 교정어를 조회합니다.",
)
async def list_terms(db: AsyncSession = Depends(get_db)) -> list[SpellcheckTermDTO]:
    """교정어 목록을 반환합니다."""
    try:
        records = await SpellcheckTermService(db).list_terms()
    except Exception as e:
        logger.exception("교정어 목록 조회 실패")
        raise HTTPException(status_code=500, detail=f"내부 서버 오류: {str(e)}")
    return [_to_dto(record) for record in records]


@router.post(
    "",
    response_model=SpellcheckTermDTO,
    summary="교정어 등록/수정",
    description="id가 없으면 새 교정어를 등록하고, 있으면 기존 교정어를 수정합니다.",
)
async def upsert_term(
    request: SpellcheckTermUpsertDTO,
    db: AsyncSession = Depends(get_db),
) -> SpellcheckTermDTO:
    """교정어를 등록하거나 수정합니다.

    Raises:
        HTTPException: 400 - 유효성 검증 실패, 404 - 교정어 없음, 500 - 서비스 오류
    """
    try:
        record = await SpellcheckTermService(db).upsert_term(
            from_text=request.from_text,
            to_text=request.to_text,
            language=request.language,
            is_active=request.is_active,
            term_id=request.id,
        )
    except SpellcheckTermNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("교정어 저장 실패")
        raise HTTPException(status_code=500, detail=f"내부 서버 오류: {str(e)}")
    return _to_dto(record)


@router.delete(
    "/{term_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="교정어 삭제",
)
async def delete_term(term_id: str, db: AsyncSession = Depends(get_db)) -> Response:
    """교정어를 삭제합니다."""
    try:
        await SpellcheckTermService(db).delete_term(term_id)
    except SpellcheckTermNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.exception("교정어 삭제 실패")
        raise HTTPException(status_code=500, detail=f"내부 서버 오류: {str(e)}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
