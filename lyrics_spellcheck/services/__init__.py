"""Service layer.

Provides service modules for business logic processing.
"""

from lyrics_spellcheck.services.spellcheck_service import SpellcheckService
from lyrics_spellcheck.services.spellcheck_term_service import (
    SpellcheckTermNotFoundError,
    SpellcheckTermService,
    SpellcheckTermServiceError,
)

__all__ = [
    "SpellcheckService",
    "SpellcheckTermNotFoundError",
    "SpellcheckTermService",
    "SpellcheckTermServiceError",
]
