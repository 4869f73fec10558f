# modules/message_splitter.py - raw chat export -> timestamped messages
"""
Splits a pasted chat export into one Message per timestamp marker.

Markers recognized as message starts:
  [25/3, 2:15 pm]          already-normalized marker
  [2:15 PM, 25/03/2024]    raw export marker (2- or 4-digit year)

Content before the first marker becomes a Message with an empty header.
Whitespace-only segments are dropped together with their marker.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from property_formatter.modules.area_matcher import split_area_lines
from property_formatter.modules.vocabulary import Vocabulary

logger = logging.getLogger(__name__)

MESSAGE_MARKER_RE = re.compile(
    r"\[\s*\d{1,2}/\d{1,2}\s*,\s*\d{1,2}:\d{2}\s*(?:am|pm)\s*\]"
    r"|\[\s*\d{1,2}:\d{2}\s*(?:am|pm)\s*,\s*\d{1,2}/\d{1,2}/\d{2,4}\s*\]",
    re.IGNORECASE,
)

# digits immediately followed by mask characters: 98765*****
MASKED_CONTACT_RE = re.compile(r"\d+\*+")


@dataclass(frozen=True)
class Message:
    header: str
    lines: Tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(([self.header] if self.header else []) + list(self.lines))


def _body_lines(segment: str) -> Tuple[str, ...]:
    return tuple(ln.strip() for ln in segment.splitlines() if ln.strip())


def split_messages(text: str) -> List[Message]:
    text = text or ""
    out: List[Message] = []
    header = ""
    cut = 0
    for m in MESSAGE_MARKER_RE.finditer(text):
        lines = _body_lines(text[cut:m.start()])
        if lines:
            out.append(Message(header, lines))
        header, cut = m.group(0), m.end()
    lines = _body_lines(text[cut:])
    if lines:
        out.append(Message(header, lines))
    return out


def is_masked_contact(text: str) -> bool:
    return bool(MASKED_CONTACT_RE.search(text or ""))


def valid_messages(messages: Iterable[Message]) -> List[Message]:
    """Drop messages carrying a partially redacted phone number; they are not listings."""
    kept = []
    for msg in messages:
        if is_masked_contact(msg.text):
            logger.debug("discarding masked-contact message %s", msg.header or "<no header>")
            continue
        kept.append(msg)
    return kept


def prepare_messages(text: str, vocab: Optional[Vocabulary] = None) -> Tuple[List[Message], int]:
    """Area pre-split, split, then masked-contact filter. Returns (messages, discarded_count)."""
    messages = split_messages(split_area_lines(text, vocab))
    kept = valid_messages(messages)
    return kept, len(messages) - len(kept)
