"""교정 규칙 생성.

기본 교정 규칙표와, 관리자가 등록한 교정어로부터
규칙을 만드는 함수를 제공합니다.
"""

import re
from collections.abc import Iterable

from lyrics_spellcheck.domain.spellcheck.models import (
    CorrectionRule,
    CorrectionTerm,
    TermLanguage,
)

# 한글과 붙은 영문도 경계로 인정되도록 ASCII 기준 단어 경계를 사용
_ASCII_WORD_BOUNDARY = r"(?a:\b)"


def _literal_rule(pattern: str, replacement: str) -> CorrectionRule:
    return CorrectionRule(pattern=re.compile(pattern), replacement=replacement)


# 순서 유지 필수: 짧은 패턴이 먼저 적용된 결과를 뒤 규칙이 이어받는다
BASIC_CORRECTIONS: tuple[CorrectionRule, ...] = (
    _literal_rule("됬", "됐"),
    _literal_rule("됫", "됐"),
    _literal_rule("됄", "될"),
    _literal_rule("됬다", "됐다"),
    _literal_rule("됬어요", "됐어요"),
    _literal_rule("되요", "돼요"),
    _literal_rule("되서", "돼서"),
    _literal_rule("할께", "할게"),
    _literal_rule("할께요", "할게요"),
    _literal_rule("될께", "될게"),
    _literal_rule("되겠지요", "되겠죠"),
    _literal_rule("그럴께", "그럴게"),
    _literal_rule("안됌", "안 됨"),
    _literal_rule("됌", "됨"),
    _literal_rule("안되요", "안 돼요"),
    _literal_rule("안되죠", "안 되죠"),
    _literal_rule("안되면", "안 되면"),
    _literal_rule("되면안", "되면 안"),
    _literal_rule("어떻해", "어떻게"),
    _literal_rule("어떻케", "어떻게"),
    _literal_rule("됬을", "됐을"),
    _literal_rule("됬겠", "됐겠"),
    _literal_rule("됬던", "됐던"),
)


def build_term_rule(term: CorrectionTerm) -> CorrectionRule | None:
    """교정어 하나로 규칙을 생성합니다.

    Args:
        term: 관리자가 등록한 교정어

    Returns:
        교정 규칙. 교정 전/후 텍스트가 비어 있으면 None
    """
    from_text = (term.from_text or "").strip()
    to_text = (term.to_text or "").strip()
    if not from_text or not to_text:
        return None

    language = (term.language or TermLanguage.KO.value).upper()
    escaped = re.escape(from_text)

    if language == TermLanguage.EN.value:
        pattern = re.compile(
            f"{_ASCII_WORD_BOUNDARY}{escaped}{_ASCII_WORD_BOUNDARY}", re.IGNORECASE
        )
    else:
        pattern = re.compile(escaped)

    return CorrectionRule(pattern=pattern, replacement=to_text)


def build_custom_rules(terms: Iterable[CorrectionTerm]) -> list[CorrectionRule]:
    """교정어 목록을 규칙 목록으로 변환합니다.

    비어 있는 교정어는 오류 없이 건너뛰며, 입력 순서를 유지합니다.

    Args:
        terms: 활성 상태의 교정어 목록

    Returns:
        교정 규칙 목록
    """
    rules = (build_term_rule(term) for term in terms)
    return [rule for rule in rules if rule is not None]
