"""Mapping from trigger categories to storage categories."""

from ..triggers import LanguageFilter, TriggerCategory, match_best

TRIGGER_TO_CATEGORY: dict[TriggerCategory, str] = {
    TriggerCategory.REMEMBER: "other",
    TriggerCategory.PREFERENCE: "preference",
    TriggerCategory.DECISION: "decision",
    TriggerCategory.IDENTITY: "entity",
    TriggerCategory.FACT: "fact",
    TriggerCategory.IMPORTANCE: "other",
}


def storage_category(category: TriggerCategory) -> str:
    """Translate a trigger category into the store's vocabulary."""
    return TRIGGER_TO_CATEGORY[category]


def detect_category(text: str, languages: LanguageFilter = "auto") -> str:
    """Storage category for text, 'other' when no trigger fires."""
    match = match_best(text, languages)
    if match is None:
        return "other"
    return storage_category(match.category)
