# modules/timestamp_normalizer.py - chat timestamps -> "[D/M, h:mm am/pm]"
# Public API: normalize_timestamps(text), count_timestamps(text), normalize_timestamp(marker)
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Strict WhatsApp export shape: [2:15 PM, 25/03/2024]
EXPORT_TIMESTAMP_RE = re.compile(
    r"\[(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>am|pm),"
    r"\s*(?P<day>\d{1,2})/(?P<month>\d{1,2})/\d{4}\]",
    re.IGNORECASE,
)

# Property-message variant: loose spacing (tabs too), 2- to 4-digit year
PROPERTY_TIMESTAMP_RE = re.compile(
    r"\[\s*(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>am|pm)\s*,"
    r"\s*(?P<day>\d{1,2})/(?P<month>\d{1,2})/\d{2,4}\s*\]",
    re.IGNORECASE,
)

# Already-normalized marker: [25/3, 2:15 pm]
CANONICAL_TIMESTAMP_RE = re.compile(
    r"\[\s*(?P<day>\d{1,2})/(?P<month>\d{1,2})\s*,"
    r"\s*(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>am|pm)\s*\]",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Timestamp:
    day: int
    month: int
    hour12: int
    minute: int
    meridiem: str

    def __str__(self) -> str:
        return f"[{self.day}/{self.month}, {self.hour12}:{self.minute:02d} {self.meridiem}]"


def fold_hour(hour: int) -> int:
    """0 -> 12, 13..23 -> 1..11; anything already in 1..12 is left alone."""
    if hour == 0:
        return 12
    if hour > 12:
        return hour - 12
    return hour


def _from_match(m: re.Match) -> Timestamp:
    # day/month are not range-checked: "32/13" passes through as-is
    return Timestamp(
        day=int(m.group("day")),
        month=int(m.group("month")),
        hour12=fold_hour(int(m.group("hour"))),
        minute=int(m.group("minute")),
        meridiem=m.group("meridiem").lower(),
    )


def parse_timestamp(marker: str) -> Optional[Timestamp]:
    s = (marker or "").strip()
    for rx in (PROPERTY_TIMESTAMP_RE, CANONICAL_TIMESTAMP_RE):
        m = rx.fullmatch(s)
        if m:
            return _from_match(m)
    return None


def normalize_timestamp(marker: str) -> Optional[str]:
    ts = parse_timestamp(marker)
    return str(ts) if ts else None


def normalize_timestamps(text: str) -> str:
    """
    Rewrite every strict export timestamp in `text`; the rest of the text is untouched.
    The meridiem is copied from the input (lowercased), never inferred from a 24h hour.
    """
    if not text:
        return text or ""
    return EXPORT_TIMESTAMP_RE.sub(lambda m: str(_from_match(m)), text)


def count_timestamps(text: str) -> int:
    return len(EXPORT_TIMESTAMP_RE.findall(text or ""))

