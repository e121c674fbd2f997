"""Trigger matching against the pattern catalog."""

import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from .catalog import COMMON, SUPPORTED_LANGUAGES, TRIGGERS, TriggerCategory, TriggerRule

AUTO = "auto"

LANGUAGE_ALIASES = {
    "be": "by",
    "cs": "cz",
}

LanguageFilter = str | Sequence[str] | None


@dataclass(frozen=True)
class MatchResult:
    """Best trigger match for a text.

    Attributes:
        category: Category of the winning rule.
        weight: Weight of the winning rule.
        language: Language of the winning rule, or "common".
    """

    category: TriggerCategory
    weight: int
    language: str


def _normalize_code(code: str) -> str | None:
    """Map a language code to a supported one, or None if unknown."""
    if not isinstance(code, str):
        return None
    code = code.strip().lower()
    code = LANGUAGE_ALIASES.get(code, code)
    return code if code in SUPPORTED_LANGUAGES else None


def resolve_languages(languages: LanguageFilter = AUTO) -> frozenset[str] | None:
    """Resolve a language filter to a set of supported codes.

    Args:
        languages: "auto", None, a single code, or a sequence of codes.

    Returns:
        The set of active language codes, or None meaning all languages.
        Unknown codes are dropped; if nothing valid remains, all
        languages are active.
    """
    if languages is None:
        return None

    if isinstance(languages, str):
        if languages.strip().lower() == AUTO:
            return None
        codes = [languages]
    else:
        codes = list(languages)

    resolved = {c for c in (_normalize_code(code) for code in codes) if c is not None}
    return frozenset(resolved) if resolved else None


@lru_cache(maxsize=128)
def _rules_for(languages: frozenset[str] | None) -> tuple[TriggerRule, ...]:
    """Catalog rules active under a resolved filter, in declaration order."""
    if languages is None:
        return TRIGGERS
    return tuple(
        rule for rule in TRIGGERS if rule.language == COMMON or rule.language in languages
    )


def active_rules(languages: LanguageFilter = AUTO) -> tuple[TriggerRule, ...]:
    """Return the rules evaluated for a language filter."""
    return _rules_for(resolve_languages(languages))


def _prepare(text: str) -> str:
    # Compose "a" + U+0301 into "á" so patterns see whole letters
    return unicodedata.normalize("NFC", text)


def match_all(text: str, languages: LanguageFilter = AUTO) -> list[TriggerRule]:
    """Get every rule that fires on text (for diagnostics).

    No weight resolution is performed; rules are returned in catalog order.
    """
    if not text:
        return []
    prepared = _prepare(text)
    return [rule for rule in active_rules(languages) if rule.matches(prepared)]


def match_best(text: str, languages: LanguageFilter = AUTO) -> MatchResult | None:
    """Check text against the catalog and return the highest-weight match.

    Ties at the maximum weight go to the first rule in catalog order.

    Args:
        text: Text to classify.
        languages: Language filter; "common" rules are always active.

    Returns:
        The best MatchResult, or None if no rule fires.
    """
    if not text:
        return None

    prepared = _prepare(text)
    best: TriggerRule | None = None
    for rule in active_rules(languages):
        if rule.matches(prepared) and (best is None or rule.weight > best.weight):
            best = rule

    if best is None:
        return None
    return MatchResult(category=best.category, weight=best.weight, language=best.language)
