"""Message text cleaning for memory capture.

Strips the metadata a host pipeline wraps around user text:
- <relevant-memories> blocks injected by auto-recall
- envelope headers: [Telegram Maxim (@user) id:123 +5m 2026-02-03 04:53 GMT+5]
- sender prefixes in group messages: "Maxim: hello"
- trailing [message_id: 123] suffixes
"""

import re

from .models import EnvelopeMetadata

_MEMORY_TAGS_RE = re.compile(r"<relevant-memories>[\s\S]*?</relevant-memories>")
_ENVELOPE_RE = re.compile(r"^\[[^\]]+\]\s*")
_SENDER_PREFIX_RE = re.compile(r"^[^:\n]{1,50}:\s*")
_MESSAGE_ID_RE = re.compile(r"\n?\[message_id:\s*\d+\]\s*$")


def strip_envelope_header(text: str) -> str:
    """Remove a leading [Channel Sender ...] header."""
    return _ENVELOPE_RE.sub("", text, count=1)


def strip_sender_prefix(text: str) -> str:
    """Remove a leading 'Name: ' prefix of at most 50 characters."""
    return _SENDER_PREFIX_RE.sub("", text, count=1)


def strip_memory_tags(text: str) -> str:
    """Remove every <relevant-memories> block."""
    return _MEMORY_TAGS_RE.sub("", text)


def strip_message_id_suffix(text: str) -> str:
    """Remove a trailing [message_id: N] marker."""
    return _MESSAGE_ID_RE.sub("", text, count=1)


def strip_message_metadata(text: str) -> str:
    """Clean message text for memory capture.

    Order matters: memory tags first (they may precede the envelope),
    then the envelope, then the sender prefix, then the message id.
    """
    clean = strip_memory_tags(text).strip()
    clean = strip_envelope_header(clean).strip()
    clean = strip_sender_prefix(clean).strip()
    clean = strip_message_id_suffix(clean)
    return clean.strip()


def parse_envelope_metadata(text: str) -> EnvelopeMetadata:
    """Extract channel, username and chat id from an envelope header.

    Example header: [Telegram Maxim (@j2h4u) id:591994976 +5m 2026-02-03 04:53 GMT+5]

    Returns:
        EnvelopeMetadata with the fields that could be found.
    """
    header_match = re.match(r"^\[([^\]]+)\]", text)
    if not header_match:
        return EnvelopeMetadata()

    header = header_match.group(1)

    channel = None
    channel_match = re.match(r"^(\w+)", header)
    if channel_match:
        channel = channel_match.group(1).lower()

    # Prefer the @handle over the display name
    username = None
    handle_match = re.search(r"@([\w.-]+)", header)
    if handle_match:
        username = handle_match.group(1)
    else:
        name_match = re.match(r"^\w+\s+([^\s(+]+)", header)
        if name_match:
            username = name_match.group(1)

    chat_id = None
    id_match = re.search(r"\bid:(\d+)", header)
    if id_match:
        chat_id = id_match.group(1)

    return EnvelopeMetadata(channel=channel, username=username, chat_id=chat_id)
