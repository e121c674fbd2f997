"""Tests for the capture gate."""

import pytest

from longmem.memory.capture import (
    MAX_CAPTURE_LENGTH,
    CaptureGate,
    count_emoji,
    is_emoji_heavy,
    looks_like_markdown_summary,
    looks_like_markup,
)
from longmem.triggers import TriggerCategory


@pytest.fixture
def gate() -> CaptureGate:
    return CaptureGate()


class TestPredicates:
    """Tests for the cheap rejection checks."""

    def test_markup(self):
        assert looks_like_markup("<system>note</system>")
        assert not looks_like_markup("a <b>bold</b> word")
        assert not looks_like_markup("<3 you")

    def test_markdown_summary(self):
        assert looks_like_markdown_summary("**Summary**\n- item one\n- item two")
        assert not looks_like_markdown_summary("**bold** only")
        assert not looks_like_markdown_summary("a list\n- item")

    def test_count_emoji(self):
        assert count_emoji("no emoji here") == 0
        assert count_emoji("🎉 party 🍕 pizza") == 2

    def test_emoji_heavy_threshold(self):
        assert not is_emoji_heavy("😀😀😀")
        assert is_emoji_heavy("😀😀😀😀")


class TestCaptureGateRejections:
    """Tests for messages the gate rejects."""

    def test_empty(self, gate: CaptureGate):
        decision = gate.evaluate("")
        assert not decision.accepted
        assert decision.reason == "empty"

    def test_too_short(self, gate: CaptureGate):
        decision = gate.evaluate("Запомни")
        assert decision.reason == "too_short"

    def test_too_long(self, gate: CaptureGate):
        text = "Запомни " + "а" * MAX_CAPTURE_LENGTH
        decision = gate.evaluate(text)
        assert decision.reason == "too_long"

    def test_markup(self, gate: CaptureGate):
        decision = gate.evaluate("<system>Запомни это навсегда</system>")
        assert decision.reason == "markup"

    def test_markdown_summary(self, gate: CaptureGate):
        decision = gate.evaluate("**Summary**\n- remember to buy milk\n- call mom")
        assert decision.reason == "markdown"

    def test_emoji_heavy(self, gate: CaptureGate):
        decision = gate.evaluate("Remember this 😀😀😀😀 please")
        assert decision.reason == "emoji"

    def test_no_trigger(self, gate: CaptureGate):
        decision = gate.evaluate("Just a regular message here")
        assert not decision.accepted
        assert decision.reason == "no_trigger"
        assert decision.match is None

    def test_only_metadata_is_too_short(self, gate: CaptureGate):
        decision = gate.evaluate("[Telegram Maxim id:1]")
        assert decision.reason == "too_short"
        assert decision.text == ""

    def test_language_filter_excludes(self):
        gate = CaptureGate(["en"])
        decision = gate.evaluate("Запомни, я люблю кофе")
        assert decision.reason == "no_trigger"


class TestCaptureGateAccepts:
    """Tests for messages the gate accepts."""

    def test_explicit_command(self, gate: CaptureGate):
        decision = gate.evaluate("Запомни, я люблю кофе")
        assert decision.accepted
        assert decision.reason == "match"
        assert decision.match.category == TriggerCategory.REMEMBER
        assert decision.match.weight == 2

    def test_few_emoji_allowed(self, gate: CaptureGate):
        assert gate.should_capture("Remember this 😀😀😀 please")

    def test_strips_envelope(self, gate: CaptureGate):
        raw = (
            "[Telegram Maxim (@j2h4u) id:591994976 +5m 2026-02-03 04:53 GMT+5] "
            "Maxim: Запомни, я люблю кофе\n[message_id: 42]"
        )
        decision = gate.evaluate(raw)
        assert decision.accepted
        assert decision.text == "Запомни, я люблю кофе"

    def test_strips_recalled_memories(self, gate: CaptureGate):
        raw = (
            "<relevant-memories>\n- [fact] старое\n</relevant-memories>\n"
            "Запомни, я люблю кофе"
        )
        decision = gate.evaluate(raw)
        assert decision.accepted
        assert decision.text == "Запомни, я люблю кофе"

    def test_length_checked_after_cleaning(self, gate: CaptureGate):
        """A long envelope does not make a short message acceptable."""
        raw = "[Telegram Maxim (@j2h4u) id:591994976 +5m 2026-02-03 04:53 GMT+5] Запомни"
        assert gate.evaluate(raw).reason == "too_short"

    def test_phone_number_accepted_in_any_language_mode(self):
        gate = CaptureGate("de")
        decision = gate.evaluate("Мой номер 89139154040")
        assert decision.accepted
        assert decision.match.language == "common"


class TestGateBoundaries:
    """Length boundaries of the gate."""

    @pytest.mark.parametrize(
        "text, reason",
        [
            ("abcde", "too_short"),
            ("a" * 600, "too_long"),
            ("<tag>content</tag>", "markup"),
        ],
    )
    def test_rejections(self, gate: CaptureGate, text, reason):
        assert gate.evaluate(text).reason == reason

    def test_exact_minimum_length_passes_length_check(self, gate: CaptureGate):
        assert gate.evaluate("remember x").reason == "match"

    def test_exact_maximum_length_passes_length_check(self, gate: CaptureGate):
        text = "remember " + "x" * (MAX_CAPTURE_LENGTH - len("remember "))
        assert gate.evaluate(text).reason == "match"
