"""맞춤법 교정 도메인 모델.

교정어(Term), 교정 규칙(Rule), 개별 교정 내역(Change)과
교정 결과(Success/Failure)를 정의합니다.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MAX_TEXT_LENGTH = 20000
MIN_LENGTH_RATIO = 0.5
MIN_LENGTH_CHECK_THRESHOLD = 20


class TermLanguage(str, Enum):
    """교정어 언어 구분."""

    KO = "KO"  # 한글 (부분 문자열 일치)
    EN = "EN"  # 영문 (단어 경계, 대소문자 무시)


class SpellcheckErrorCode(str, Enum):
    """교정 실패 코드."""

    EMPTY_TEXT = "EMPTY_TEXT"
    CORRECTION_INVALID = "CORRECTION_INVALID"
    SPELLCHECK_FAILED = "SPELLCHECK_FAILED"


class CorrectionTerm(BaseModel):
    """관리자가 등록한 교정어 쌍.

    language가 없으면 한글(KO)로 취급합니다. 공백뿐인 항목은
    규칙 생성 단계에서 조용히 제외됩니다.
    """

    model_config = ConfigDict(frozen=True)

    from_text: str = Field(default="", description="교정 전 텍스트")
    to_text: str = Field(default="", description="교정 후 텍스트")
    language: str | None = Field(default=None, description="언어 구분 (KO/EN)")


@dataclass(frozen=True)
class CorrectionRule:
    """컴파일된 패턴과 치환 문자열."""

    pattern: re.Pattern[str]
    replacement: str


class CorrectionChange(BaseModel):
    """규칙 적용 중 발생한 개별 치환 내역.

    index는 최종 교정문이 아니라, 해당 규칙이 적용되기 직전
    텍스트에서의 위치입니다.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from", description="원문에서 일치한 문자열")
    to: str = Field(description="치환된 문자열")
    index: int = Field(ge=0, description="규칙 적용 직전 텍스트 기준 위치")


class SpellcheckError(BaseModel):
    """교정 실패 상세."""

    code: SpellcheckErrorCode = Field(description="실패 코드")
    message: str = Field(description="사용자 안내 메시지")


class SpellcheckSuccess(BaseModel):
    """교정 성공 결과."""

    ok: Literal[True] = True
    original: str = Field(description="입력 원문")
    corrected: str = Field(description="교정된 텍스트")
    changes: list[CorrectionChange] = Field(
        default_factory=list, description="치환 내역 (적용 순서)"
    )
    truncated: bool = Field(
        default=False, description="최대 길이 초과로 뒷부분을 교정하지 않았는지 여부"
    )


class SpellcheckFailure(BaseModel):
    """교정 실패 결과."""

    ok: Literal[False] = False
    error: SpellcheckError


SpellcheckResult = SpellcheckSuccess | SpellcheckFailure


class SpellcheckTermRecord(BaseModel):
    """저장된 맞춤법 사전 항목 (관리 화면용)."""

    id: str = Field(description="교정어 UUID")
    from_text: str = Field(description="교정 전 텍스트")
    to_text: str = Field(description="교정 후 텍스트")
    language: TermLanguage = Field(default=TermLanguage.KO, description="언어 구분")
    is_active: bool = Field(default=True, description="활성화 여부")
    created_at: datetime | None = Field(default=None, description="생성 시각")
    updated_at: datetime | None = Field(default=None, description="수정 시각")

    def to_term(self) -> CorrectionTerm:
        """규칙 생성에 사용할 교정어로 변환합니다."""
        return CorrectionTerm(
            from_text=self.from_text,
            to_text=self.to_text,
            language=self.language.value,
        )
