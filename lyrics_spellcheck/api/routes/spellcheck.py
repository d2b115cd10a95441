"""맞춤법 교정 API 라우터.

교정 실패는 HTTP 오류가 아닌 {ok: false, error} 응답으로 반환합니다.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lyrics_spellcheck.core.config.settings import settings
from lyrics_spellcheck.core.models.api import (
    SpellcheckErrorDTO,
    SpellcheckMeta,
    SpellcheckRequestDTO,
    SpellcheckSuccessDTO,
)
from lyrics_spellcheck.domain.spellcheck import (
    SpellcheckError,
    SpellcheckErrorCode,
    SpellcheckFailure,
)
from lyrics_spellcheck.infrastructure.database.connection import get_db
from lyrics_spellcheck.services.spellcheck_service import SpellcheckService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/spellcheck", tags=["spellcheck"])

SPELLCHECK_FAILED_MESSAGE = "일시적으로 맞춤법 적용에 실패했습니다."


@router.post(
    "",
    response_model=SpellcheckSuccessDTO | SpellcheckErrorDTO,
    summary="맞춤법 교정",
    description="기본 교정 규칙과 맞춤법 사전을 적용해 텍스트를 교정합니다.",
)
async def check_spelling(
    request: SpellcheckRequestDTO,
    db: AsyncSession = Depends(get_db),
) -> SpellcheckSuccessDTO | SpellcheckErrorDTO:
    """맞춤법 교정 API.

    Args:
        request: 교정 요청 (텍스트, 적용 모드)
        db: 비동기 데이터베이스 세션

    Returns:
        교정 성공 시 원문, 교정문, 치환 내역과 meta.
        실패 시 오류 코드와 메시지.
    """
    try:
        service = SpellcheckService(db)
        result = await service.check(request.text)

        if isinstance(result, SpellcheckFailure):
            return SpellcheckErrorDTO(error=result.error)

        return SpellcheckSuccessDTO(
            original=result.original,
            corrected=result.corrected,
            changes=result.changes,
            meta=SpellcheckMeta(
                engine=settings.spellcheck_engine,
                truncated=result.truncated,
            ),
        )

    except Exception:
        logger.exception("맞춤법 교정 중 예상치 못한 오류")
        return SpellcheckErrorDTO(
            error=SpellcheckError(
                code=SpellcheckErrorCode.SPELLCHECK_FAILED,
                message=SPELLCHECK_FAILED_MESSAGE,
            )
        )
