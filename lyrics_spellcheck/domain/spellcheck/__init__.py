"""맞춤법 교정 도메인.

규칙 기반 텍스트 교정 엔진과 관련 모델을 정의합니다.
"""

from lyrics_spellcheck.domain.spellcheck.engine import (
    ReplacementOutcome,
    apply_replacement_rules,
    spellcheck_text,
)
from lyrics_spellcheck.domain.spellcheck.models import (
    MAX_TEXT_LENGTH,
    MIN_LENGTH_CHECK_THRESHOLD,
    MIN_LENGTH_RATIO,
    CorrectionChange,
    CorrectionRule,
    CorrectionTerm,
    SpellcheckError,
    SpellcheckErrorCode,
    SpellcheckFailure,
    SpellcheckResult,
    SpellcheckSuccess,
    SpellcheckTermRecord,
    TermLanguage,
)
from lyrics_spellcheck.domain.spellcheck.rules import (
    BASIC_CORRECTIONS,
    build_custom_rules,
    build_term_rule,
)

__all__ = [
    "BASIC_CORRECTIONS",
    "MAX_TEXT_LENGTH",
    "MIN_LENGTH_CHECK_THRESHOLD",
    "MIN_LENGTH_RATIO",
    "CorrectionChange",
    "CorrectionRule",
    "CorrectionTerm",
    "ReplacementOutcome",
    "SpellcheckError",
    "SpellcheckErrorCode",
    "SpellcheckFailure",
    "SpellcheckResult",
    "SpellcheckSuccess",
    "SpellcheckTermRecord",
    "TermLanguage",
    "apply_replacement_rules",
    "build_custom_rules",
    "build_term_rule",
    "spellcheck_text",
]
