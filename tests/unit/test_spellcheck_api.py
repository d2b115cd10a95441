"""맞춤법 교정 API 테스트."""

from collections.abc import AsyncGenerator, Iterator
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from lyrics_spellcheck.domain.spellcheck import BASIC_CORRECTIONS, CorrectionTerm
from lyrics_spellcheck.infrastructure.database.connection import get_db
from lyrics_spellcheck.infrastructure.database.repository import (
    SpellcheckTermRepository,
)
from lyrics_spellcheck.main import app
from lyrics_spellcheck.services.spellcheck_service import SpellcheckService

SPELLCHECK_URL = "/api/v1/spellcheck"
TERMS_URL = "/api/v1/spellcheck/terms"


async def _override_get_db() -> AsyncGenerator[AsyncMock, None]:
    yield AsyncMock()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """DB 세션을 Mock으로 대체한 테스트 클라이언트."""
    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSpellcheckEndpoint:
    """POST /spellcheck 테스트."""

    def test_교정_결과와_meta를_반환한다(self, client: TestClient) -> None:
        """성공 응답에는 교정문, 치환 내역, meta가 포함된다."""
        # Given
        with patch.object(
            SpellcheckTermRepository,
            "get_active_terms",
            AsyncMock(return_value=[]),
        ):
            # When
            response = client.post(SPELLCHECK_URL, json={"text": "됬어", "mode": "auto_apply"})

        # Then
        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["original"] == "됬어"
        assert body["corrected"] == "됐어"
        assert body["changes"] == [{"from": "됬", "to": "됐", "index": 0}]
        assert body["meta"] == {"engine": "rule-basic", "truncated": False}

    def test_사용자_교정어를_적용한다(self, client: TestClient) -> None:
        """맞춤법 사전의 EN 교정어가 단어 단위로 적용된다."""
        terms = [CorrectionTerm(from_text="cat", to_text="dog", language="EN")]
        with patch.object(
            SpellcheckTermRepository,
            "get_active_terms",
            AsyncMock(return_value=terms),
        ):
            response = client.post(SPELLCHECK_URL, json={"text": "cat concatenate"})

        assert response.json()["corrected"] == "dog concatenate"

    def test_빈_입력은_EMPTY_TEXT_응답을_반환한다(self, client: TestClient) -> None:
        """text가 없거나 공백이면 ok=false와 EMPTY_TEXT를 반환한다."""
        response = client.post(SPELLCHECK_URL, json={})

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is False
        assert body["error"]["code"] == "EMPTY_TEXT"
        assert body["error"]["message"] == "내용을 입력해주세요."

    def test_예상치_못한_오류는_SPELLCHECK_FAILED로_반환한다(
        self, client: TestClient
    ) -> None:
        """서비스 예외는 HTTP 오류 대신 실패 응답으로 변환된다."""
        with patch.object(
            SpellcheckService, "check", AsyncMock(side_effect=RuntimeError("boom"))
        ):
            response = client.post(SPELLCHECK_URL, json={"text": "됬어"})

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is False
        assert body["error"]["code"] == "SPELLCHECK_FAILED"


class TestSpellcheckTermEndpoints:
    """맞춤법 사전 관리 API 테스트."""

    def test_빈_교정어는_422를_반환한다(self, client: TestClient) -> None:
        """from_text가 빈 문자열이면 요청 검증에 실패한다."""
        response = client.post(TERMS_URL, json={"from_text": "", "to_text": "할게"})

        assert response.status_code == 422

    def test_공백뿐인_교정어는_400을_반환한다(self, client: TestClient) -> None:
        """공백뿐인 교정어는 서비스 검증에서 거부된다."""
        response = client.post(TERMS_URL, json={"from_text": "  ", "to_text": "할게"})

        assert response.status_code == 400

    def test_없는_교정어_삭제는_404를_반환한다(self, client: TestClient) -> None:
        """삭제 대상이 없으면 404를 반환한다."""
        with patch.object(
            SpellcheckTermRepository, "delete", AsyncMock(return_value=False)
        ):
            response = client.delete(f"{TERMS_URL}/missing")

        assert response.status_code == 404

    def test_교정어를_삭제하면_204를_반환한다(self, client: TestClient) -> None:
        """삭제에 성공하면 본문 없이 204를 반환한다."""
        with patch.object(
            SpellcheckTermRepository, "delete", AsyncMock(return_value=True)
        ):
            response = client.delete(f"{TERMS_URL}/term-1")

        assert response.status_code == 204


class TestHealthEndpoint:
    """GET /health 테스트."""

    def test_엔진_정보를_반환한다(self, client: TestClient) -> None:
        """헬스 체크는 엔진 이름과 기본 규칙 수를 포함한다."""
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["engine"] == "rule-basic"
        assert body["builtin_rules"] == len(BASIC_CORRECTIONS)
