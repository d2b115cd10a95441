"""규칙 기반 맞춤법 교정 엔진.

규칙을 순서대로 적용하며, 각 규칙은 이전 규칙까지 적용된
텍스트를 대상으로 동작합니다. 예상 가능한 실패(빈 입력, 비정상 결과)는
예외 대신 SpellcheckFailure로 반환합니다.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from lyrics_spellcheck.domain.spellcheck.models import (
    MAX_TEXT_LENGTH,
    MIN_LENGTH_CHECK_THRESHOLD,
    MIN_LENGTH_RATIO,
    CorrectionChange,
    CorrectionRule,
    SpellcheckError,
    SpellcheckErrorCode,
    SpellcheckFailure,
    SpellcheckResult,
    SpellcheckSuccess,
)
from lyrics_spellcheck.domain.spellcheck.rules import BASIC_CORRECTIONS

EMPTY_TEXT_MESSAGE = "내용을 입력해주세요."
CORRECTION_INVALID_MESSAGE = "맞춤법 결과가 비정상입니다."


@dataclass
class ReplacementOutcome:
    """규칙 적용 결과."""

    corrected: str
    changes: list[CorrectionChange] = field(default_factory=list)


def apply_replacement_rules(
    text: str, rules: Sequence[CorrectionRule]
) -> ReplacementOutcome:
    """규칙을 순서대로 적용하고 치환 내역을 수집합니다.

    Args:
        text: 교정할 텍스트
        rules: 적용 순서대로 정렬된 규칙 목록

    Returns:
        교정된 텍스트와 치환 내역
    """
    corrected = text
    changes: list[CorrectionChange] = []

    for rule in rules:
        matches = list(rule.pattern.finditer(corrected))
        if not matches:
            continue

        replacement = rule.replacement
        corrected = rule.pattern.sub(lambda _match: replacement, corrected)

        for match in matches:
            before = match.group(0)
            if not before:
                continue
            changes.append(
                CorrectionChange(from_=before, to=replacement, index=match.start())
            )

    return ReplacementOutcome(corrected=corrected, changes=changes)


def _failure(code: SpellcheckErrorCode, message: str) -> SpellcheckFailure:
    return SpellcheckFailure(error=SpellcheckError(code=code, message=message))


def spellcheck_text(
    text: str, rules: Sequence[CorrectionRule] = BASIC_CORRECTIONS
) -> SpellcheckResult:
    """텍스트에 교정 규칙을 적용합니다.

    MAX_TEXT_LENGTH를 넘는 부분은 교정하지 않고 그대로 이어 붙입니다.
    교정 결과가 비어 있거나, 긴 입력이 절반 미만으로 줄어든 경우
    CORRECTION_INVALID를 반환합니다.

    Args:
        text: 입력 원문
        rules: 적용할 규칙 목록 (기본값: 기본 교정 규칙)

    Returns:
        SpellcheckSuccess 또는 SpellcheckFailure
    """
    if not text.strip():
        return _failure(SpellcheckErrorCode.EMPTY_TEXT, EMPTY_TEXT_MESSAGE)

    working_text = text
    remainder = ""
    truncated = False
    if len(text) > MAX_TEXT_LENGTH:
        working_text = text[:MAX_TEXT_LENGTH]
        remainder = text[MAX_TEXT_LENGTH:]
        truncated = True

    outcome = apply_replacement_rules(working_text, rules)
    corrected = outcome.corrected + remainder

    if not corrected.strip():
        return _failure(
            SpellcheckErrorCode.CORRECTION_INVALID, CORRECTION_INVALID_MESSAGE
        )

    # 긴 입력이 비정상적으로 줄어드는 경우 방지
    if (
        len(text) > MIN_LENGTH_CHECK_THRESHOLD
        and len(corrected) < len(text) * MIN_LENGTH_RATIO
    ):
        return _failure(
            SpellcheckErrorCode.CORRECTION_INVALID, CORRECTION_INVALID_MESSAGE
        )

    return SpellcheckSuccess(
        original=text,
        corrected=corrected,
        changes=outcome.changes,
        truncated=truncated,
    )
