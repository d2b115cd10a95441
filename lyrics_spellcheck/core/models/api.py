"""API 요청/응답 모델 (DTO)."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from lyrics_spellcheck.domain.spellcheck.models import (
    CorrectionChange,
    SpellcheckError,
    TermLanguage,
)


class SpellcheckRequestDTO(BaseModel):
    """맞춤법 교정 요청 DTO.

    빈 문자열도 허용하며, 이 경우 EMPTY_TEXT 실패 응답을 반환합니다.
    """

    text: str = Field(
        default="",
        description="교정할 텍스트 (가사 등)",
        examples=["오늘은 잘 됬어\n내일도 할께요"],
    )
    mode: str | None = Field(default=None, description="클라이언트 적용 모드 (예: auto_apply)")


class SpellcheckMeta(BaseModel):
    """교정 응답 부가 정보."""

    engine: str = Field(description="교정 엔진 이름")
    truncated: bool = Field(description="최대 길이 초과로 뒷부분을 교정하지 않았는지 여부")


class SpellcheckSuccessDTO(BaseModel):
    """맞춤법 교정 성공 응답 DTO."""

    ok: Literal[True] = True
    original: str = Field(description="입력 원문")
    corrected: str = Field(description="교정된 텍스트")
    changes: list[CorrectionChange] = Field(description="치환 내역 (from, to, index)")
    meta: SpellcheckMeta

    class Config:
        """Pydantic 설정."""

        json_schema_extra = {
            "example": {
                "ok": True,
                "original": "잘 됬어",
                "corrected": "잘 됐어",
                "changes": [{"from": "됬", "to": "됐", "index": 2}],
                "meta": {"engine": "rule-basic", "truncated": False},
            }
        }


class SpellcheckErrorDTO(BaseModel):
    """맞춤법 교정 실패 응답 DTO."""

    ok: Literal[False] = False
    error: SpellcheckError


class SpellcheckTermUpsertDTO(BaseModel):
    """교정어 등록/수정 요청 DTO.

    id가 없으면 신규 등록, 있으면 수정합니다.
    """

    id: str | None = Field(default=None, description="수정할 교정어 UUID")
    from_text: str = Field(min_length=1, max_length=200, description="교정 전 텍스트")
    to_text: str = Field(min_length=1, max_length=200, description="교정 후 텍스트")
    language: TermLanguage = Field(default=TermLanguage.KO, description="언어 구분")
    is_active: bool = Field(default=True, description="활성화 여부")


class SpellcheckTermDTO(BaseModel):
    """교정어 응답 DTO."""

    id: str = Field(description="교정어 UUID")
    from_text: str = Field(description="교정 전 텍스트")
    to_text: str = Field(description="교정 후 텍스트")
    language: TermLanguage = Field(description="언어 구분")
    is_active: bool = Field(description="활성화 여부")
    created_at: datetime | None = Field(default=None, description="생성 시각")
    updated_at: datetime | None = Field(default=None, description="수정 시각")


class HealthCheckResponse(BaseModel):
    """헬스 체크 응답 모델.

    서비스 상태 확인 API의 응답 형식을 정의합니다.
    """

    status: str = Field(default="healthy", description="서비스 상태")
    version: str = Field(description="애플리케이션 버전")
    service: str = Field(description="서비스 이름")
    engine: str = Field(description="교정 엔진 이름")
    builtin_rules: int = Field(ge=0, description="기본 교정 규칙 수")
