"""맞춤법 교정 서비스 - 애플리케이션 계층."""

from collections.abc import Sequence

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lyrics_spellcheck.core.config.settings import settings
from lyrics_spellcheck.domain.spellcheck import (
    BASIC_CORRECTIONS,
    CorrectionRule,
    CorrectionTerm,
    SpellcheckResult,
    SpellcheckSuccess,
    build_custom_rules,
    spellcheck_text,
)
from lyrics_spellcheck.infrastructure.database.repository import (
    SpellcheckTermRepository,
)

logger = structlog.get_logger(__name__)


class SpellcheckService:
    """가사 맞춤법 교정 서비스.

    맞춤법 사전의 활성 교정어와 기본 교정 규칙을 합쳐
    규칙 기반 교정 엔진을 실행합니다.
    """

    def __init__(
        self,
        db_session: AsyncSession,
        custom_rules_first: bool | None = None,
    ) -> None:
        """서비스를 초기화합니다.

        Args:
            db_session: 비동기 데이터베이스 세션
            custom_rules_first: 사용자 규칙 우선 여부 (기본값: 설정값)
        """
        self.term_repo = SpellcheckTermRepository(db_session)
        self.custom_rules_first = (
            settings.spellcheck_custom_rules_first
            if custom_rules_first is None
            else custom_rules_first
        )

    async def load_custom_terms(self) -> list[CorrectionTerm]:
        """활성 교정어를 조회합니다.

        사전 조회에 실패하면 사용자 교정어 없이 진행합니다.

        Returns:
            활성 교정어 목록
        """
        try:
            return await self.term_repo.get_active_terms()
        except SQLAlchemyError as e:
            logger.warning("맞춤법 사전 조회 실패, 기본 규칙만 사용", error=str(e))
            return []

    def build_rules(
        self, custom_terms: Sequence[CorrectionTerm]
    ) -> list[CorrectionRule]:
        """사용자 교정어 규칙과 기본 규칙을 적용 순서대로 합칩니다."""
        custom_rules = build_custom_rules(custom_terms)
        if self.custom_rules_first:
            return [*custom_rules, *BASIC_CORRECTIONS]
        return [*BASIC_CORRECTIONS, *custom_rules]

    async def check(self, text: str) -> SpellcheckResult:
        """텍스트의 맞춤법을 교정합니다.

        빈 입력은 사전을 조회하지 않고 바로 엔진의 실패 결과를 반환합니다.

        Args:
            text: 교정할 텍스트

        Returns:
            교정 결과 (성공 또는 실패)
        """
        if not text.strip():
            return spellcheck_text(text, [])

        custom_terms = await self.load_custom_terms()
        rules = self.build_rules(custom_terms)
        result = spellcheck_text(text, rules)

        if isinstance(result, SpellcheckSuccess):
            logger.info(
                "맞춤법 교정 완료",
                length=len(text),
                custom_terms=len(custom_terms),
                changes=len(result.changes),
                truncated=result.truncated,
            )
        else:
            logger.info(
                "맞춤법 교정 거부",
                length=len(text),
                code=result.error.code.value,
            )
        return result
