"""Heuristic gate deciding whether a message is worth auto-capturing."""

import logging
import re
from dataclasses import dataclass

from ..triggers import AUTO, LanguageFilter, MatchResult, match_best
from .message_utils import strip_message_metadata

logger = logging.getLogger(__name__)

MIN_CAPTURE_LENGTH = 10
MAX_CAPTURE_LENGTH = 500
MAX_EMOJI = 3

_EMOJI_RE = re.compile("[\U0001F300-\U0001F9FF]")


def is_too_short(text: str) -> bool:
    return len(text) < MIN_CAPTURE_LENGTH


def is_too_long(text: str) -> bool:
    return len(text) > MAX_CAPTURE_LENGTH


def looks_like_markup(text: str) -> bool:
    """System-injected content such as <tag>...</tag>."""
    return text.startswith("<") and "</" in text


def looks_like_markdown_summary(text: str) -> bool:
    """Agent summaries: bold markers plus dash bullet lines."""
    return "**" in text and "\n-" in text


def count_emoji(text: str) -> int:
    return len(_EMOJI_RE.findall(text))


def is_emoji_heavy(text: str) -> bool:
    return count_emoji(text) > MAX_EMOJI


@dataclass(frozen=True)
class CaptureDecision:
    """Outcome of running the capture gate on one message.

    Attributes:
        accepted: True if the text should be stored.
        reason: 'match' when accepted, otherwise the rejecting check
            ('empty', 'too_short', 'too_long', 'markup', 'markdown',
            'emoji', 'no_trigger').
        text: The cleaned text the checks ran on.
        match: The trigger match when accepted.
    """

    accepted: bool
    reason: str
    text: str
    match: MatchResult | None = None


class CaptureGate:
    """Runs the cheap rejection checks, then the trigger matcher."""

    def __init__(self, languages: LanguageFilter = AUTO) -> None:
        """Initialize the gate.

        Args:
            languages: Language filter passed to the trigger matcher.
        """
        self.languages = languages

    def evaluate(self, text: str) -> CaptureDecision:
        """Evaluate a raw message text.

        Args:
            text: Message text, possibly wrapped in envelope metadata.

        Returns:
            CaptureDecision describing the first failing check, or the match.
        """
        if not text:
            return CaptureDecision(accepted=False, reason="empty", text="")

        clean = strip_message_metadata(text)
        preview = clean if len(clean) <= 60 else clean[:60] + "..."

        if clean != text:
            logger.debug("[capture] Stripped metadata, evaluating clean text")

        checks = (
            ("too_short", is_too_short),
            ("too_long", is_too_long),
            ("markup", looks_like_markup),
            ("markdown", looks_like_markdown_summary),
            ("emoji", is_emoji_heavy),
        )
        for reason, check in checks:
            if check(clean):
                logger.debug("[capture] SKIP (%s, %d chars): %r", reason, len(clean), preview)
                return CaptureDecision(accepted=False, reason=reason, text=clean)

        match = match_best(clean, self.languages)
        if match is None:
            logger.debug(
                "[capture] SKIP (no trigger, lang=%r): %r", self.languages, preview
            )
            return CaptureDecision(accepted=False, reason="no_trigger", text=clean)

        logger.debug(
            "[capture] MATCH %s/%s (weight %d): %r",
            match.category.value,
            match.language,
            match.weight,
            preview,
        )
        return CaptureDecision(accepted=True, reason="match", text=clean, match=match)

    def should_capture(self, text: str) -> bool:
        """Return True if text passes every check and fires a trigger."""
        return self.evaluate(text).accepted
