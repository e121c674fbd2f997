"""Multilingual trigger patterns for memory auto-capture."""

from .catalog import COMMON, SUPPORTED_LANGUAGES, TRIGGERS, TriggerCategory, TriggerRule
from .matcher import AUTO, LanguageFilter, MatchResult, match_all, match_best, resolve_languages

__all__ = [
    "AUTO",
    "COMMON",
    "LanguageFilter",
    "MatchResult",
    "SUPPORTED_LANGUAGES",
    "TRIGGERS",
    "TriggerCategory",
    "TriggerRule",
    "match_all",
    "match_best",
    "resolve_languages",
]
