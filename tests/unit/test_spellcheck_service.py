"""Service layer tests for spellcheck."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from lyrics_spellcheck.domain.spellcheck import (
    BASIC_CORRECTIONS,
    CorrectionTerm,
    SpellcheckErrorCode,
    SpellcheckFailure,
    SpellcheckSuccess,
)
from lyrics_spellcheck.services.spellcheck_service import SpellcheckService


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """Mock database session."""
    return AsyncMock()


@pytest.fixture
def sample_terms() -> list[CorrectionTerm]:
    """샘플 교정어 목록."""
    return [
        CorrectionTerm(from_text="할께", to_text="할 게", language="KO"),
        CorrectionTerm(from_text="feat", to_text="Feat.", language="EN"),
    ]


class TestSpellcheckService:
    """SpellcheckService 테스트."""

    async def test_사용자_교정어를_기본_규칙보다_먼저_적용한다(
        self,
        mock_db_session: AsyncMock,
        sample_terms: list[CorrectionTerm],
    ) -> None:
        """사용자 규칙이 먼저 적용되어 기본 규칙이 같은 부분을 바꾸지 않는다."""
        # Given
        service = SpellcheckService(mock_db_session, custom_rules_first=True)
        service.term_repo.get_active_terms = AsyncMock(return_value=sample_terms)

        # When
        result = await service.check("내일 할께 됬어")

        # Then
        assert isinstance(result, SpellcheckSuccess)
        assert result.corrected == "내일 할 게 됐어"
        assert [change.to for change in result.changes] == ["할 게", "됐"]

    async def test_기본_규칙을_먼저_적용하도록_설정할_수_있다(
        self, mock_db_session: AsyncMock
    ) -> None:
        """custom_rules_first=False면 기본 규칙 결과에 사용자 규칙이 적용된다."""
        # Given
        terms = [CorrectionTerm(from_text="됐어", to_text="됐지")]
        service = SpellcheckService(mock_db_session, custom_rules_first=False)
        service.term_repo.get_active_terms = AsyncMock(return_value=terms)

        # When
        result = await service.check("됬어")

        # Then
        assert isinstance(result, SpellcheckSuccess)
        assert result.corrected == "됐지"

    async def test_사용자_규칙_우선이면_원문_기준으로_일치해야_한다(
        self, mock_db_session: AsyncMock
    ) -> None:
        """사용자 규칙 우선일 때는 기본 규칙 적용 전 텍스트에 일치해야 한다."""
        terms = [CorrectionTerm(from_text="됐어", to_text="됐지")]
        service = SpellcheckService(mock_db_session, custom_rules_first=True)
        service.term_repo.get_active_terms = AsyncMock(return_value=terms)

        result = await service.check("됬어")

        assert isinstance(result, SpellcheckSuccess)
        assert result.corrected == "됐어"

    async def test_사전_조회_실패시_기본_규칙만_사용한다(
        self, mock_db_session: AsyncMock
    ) -> None:
        """DB 오류가 나면 사용자 교정어 없이 교정한다."""
        # Given
        service = SpellcheckService(mock_db_session)
        service.term_repo.get_active_terms = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
        )

        # When
        result = await service.check("되요")

        # Then
        assert isinstance(result, SpellcheckSuccess)
        assert result.corrected == "돼요"

    async def test_빈_입력은_사전을_조회하지_않는다(
        self, mock_db_session: AsyncMock
    ) -> None:
        """공백뿐인 입력은 DB 조회 없이 EMPTY_TEXT를 반환한다."""
        # Given
        service = SpellcheckService(mock_db_session)
        service.term_repo.get_active_terms = AsyncMock(return_value=[])

        # When
        result = await service.check("  \n ")

        # Then
        assert isinstance(result, SpellcheckFailure)
        assert result.error.code == SpellcheckErrorCode.EMPTY_TEXT
        service.term_repo.get_active_terms.assert_not_called()

    async def test_예상치_못한_오류는_전파한다(
        self, mock_db_session: AsyncMock
    ) -> None:
        """DB 오류가 아닌 예외는 호출자에게 전달된다."""
        service = SpellcheckService(mock_db_session)
        service.term_repo.get_active_terms = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            await service.check("됬어")

    def test_규칙_목록은_사용자_규칙과_기본_규칙을_합친다(
        self,
        mock_db_session: AsyncMock,
        sample_terms: list[CorrectionTerm],
    ) -> None:
        """build_rules는 사용자 규칙 뒤에 기본 규칙을 붙인다."""
        service = SpellcheckService(mock_db_session, custom_rules_first=True)

        rules = service.build_rules(sample_terms)

        assert len(rules) == len(sample_terms) + len(BASIC_CORRECTIONS)
        assert rules[0].replacement == "할 게"
        assert rules[len(sample_terms):] == list(BASIC_CORRECTIONS)
