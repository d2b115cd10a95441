"""헬스 체크 API 라우터."""

from fastapi import APIRouter

from lyrics_spellcheck.core.config.settings import settings
from lyrics_spellcheck.core.models.api import HealthCheckResponse
from lyrics_spellcheck.domain.spellcheck import BASIC_CORRECTIONS

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthCheckResponse,
    summary="헬스 체크",
    description="서비스 상태와 교정 엔진 정보를 확인합니다.",
)
async def health_check() -> HealthCheckResponse:
    """헬스 체크 엔드포인트.

    데이터베이스를 조회하지 않으므로 사전이 비어 있어도 healthy를 반환합니다.

    Returns:
        서비스 상태, 버전, 교정 엔진 이름과 기본 규칙 수
    """
    return HealthCheckResponse(
        status="healthy",
        version=settings.app_version,
        service=settings.app_name,
        engine=settings.spellcheck_engine,
        builtin_rules=len(BASIC_CORRECTIONS),
    )
