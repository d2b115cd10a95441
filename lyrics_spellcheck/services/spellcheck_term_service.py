"""맞춤법 사전 관리 서비스.

관리자가 반복되는 오탈자를 교정어로 등록, 수정, 삭제합니다.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from lyrics_spellcheck.domain.spellcheck import SpellcheckTermRecord, TermLanguage
from lyrics_spellcheck.infrastructure.database.repository import (
    SpellcheckTermRepository,
)

logger = structlog.get_logger(__name__)


class SpellcheckTermServiceError(Exception):
    """맞춤법 사전 서비스 에러."""

    pass


class SpellcheckTermNotFoundError(SpellcheckTermServiceError):
    """교정어를 찾을 수 없음."""

    pass


class SpellcheckTermService:
    """맞춤법 사전 관리 서비스."""

    def __init__(self, db_session: AsyncSession) -> None:
        """서비스를 초기화합니다.

        Args:
            db_session: 비동기 데이터베이스 세션
        """
        self.term_repo = SpellcheckTermRepository(db_session)

    async def list_terms(self) -> list[SpellcheckTermRecord]:
        """등록된 모든 교정어를 반환합니다."""
        return await self.term_repo.get_all()

    async def upsert_term(
        self,
        from_text: str,
        to_text: str,
        language: str | TermLanguage | None = None,
        is_active: bool = True,
        term_id: str | None = None,
    ) -> SpellcheckTermRecord:
        """교정어를 등록하거나 수정합니다.

        Args:
            from_text: 교정 전 텍스트
            to_text: 교정 후 텍스트
            language: 언어 구분 (없으면 KO)
            is_active: 활성화 여부
            term_id: 수정할 교정어 ID (없으면 신규 등록)

        Returns:
            저장된 교정어 레코드

        Raises:
            ValueError: 교정 전/후 텍스트가 비었거나 언어 값이 잘못된 경우
            SpellcheckTermNotFoundError: 수정할 교정어가 없는 경우
        """
        from_text = (from_text or "").strip()
        to_text = (to_text or "").strip()
        if not from_text or not to_text:
            raise ValueError("교정 전/후 단어를 입력해주세요.")

        normalized_language = self._normalize_language(language)

        if term_id is None:
            return await self.term_repo.create(
                from_text=from_text,
                to_text=to_text,
                language=normalized_language,
                is_active=is_active,
            )

        record = await self.term_repo.update(
            term_id,
            from_text=from_text,
            to_text=to_text,
            language=normalized_language,
            is_active=is_active,
        )
        if record is None:
            raise SpellcheckTermNotFoundError(f"교정어를 찾을 수 없습니다: {term_id}")
        return record

    async def delete_term(self, term_id: str) -> None:
        """교정어를 삭제합니다.

        Raises:
            SpellcheckTermNotFoundError: 교정어가 없는 경우
        """
        if not await self.term_repo.delete(term_id):
            raise SpellcheckTermNotFoundError(f"교정어를 찾을 수 없습니다: {term_id}")

    @staticmethod
    def _normalize_language(language: str | TermLanguage | None) -> TermLanguage:
        if isinstance(language, TermLanguage):
            return language
        value = (language or TermLanguage.KO.value).strip().upper()
        try:
            return TermLanguage(value)
        except ValueError as e:
            logger.warning("지원하지 않는 교정어 언어", language=language)
            raise ValueError(f"지원하지 않는 언어입니다: {language}") from e
