# modules/field_extractor.py - one message -> PropertyRecord (single left-to-right line scan)
# Public API preserved: extract_record(message, vocab), extract_fields(lines, message_text, vocab)
from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass, fields
from typing import Dict, List, Optional, Sequence

from property_formatter.modules.area_matcher import match_area
from property_formatter.modules.message_splitter import Message
from property_formatter.modules.price_extractor import (
    PriceSequence,
    extract_price,
    match_deposit_months,
)
from property_formatter.modules.timestamp_normalizer import normalize_timestamp
from property_formatter.modules.vocabulary import Vocabulary, default_vocabulary

logger = logging.getLogger(__name__)

NA = "N/A"
OTHER_AREA = "Other"

RESALE = "Res_resale"
RENTAL = "Res_rental"

# --------------------------------------------------------------------------------------
# Patterns
PROPERTY_TYPE_RE = re.compile(r"(Resale|Rental)", re.IGNORECASE)
OWNER_RE = re.compile(r"Owner\s*([\s\S]*?)(?=\s*\d{10})", re.IGNORECASE)
CONTACT_RE = re.compile(r"\d{10}")
PROPERTY_CODE_RE = re.compile(r"Property Code", re.IGNORECASE)
SUB_PROPERTY_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:[-_\s]+)?\s*(BHK|RK)", re.IGNORECASE)
SIZE_RE = re.compile(
    r"(?:Carpet area|Built up area|Super Built-up area|\d+\s*(?:sq\.ft|sqft)\s*Built Up area)"
    r"\s*:?\s*(\d+(?:\.\d+)?)\s*(?:sqft\.?|sq\.ft)?",
    re.IGNORECASE,
)
FURNISHING_RE = re.compile(r"(Furnished|Unfurnished|Semi-?Furnished|Semi\s+Furnished)", re.IGNORECASE)
FLOOR_RE = re.compile(
    r"\(?\s*(\d+(?:st|nd|rd|th)?)\s*(?:of|out\s+of)\s*(\d+(?:st|nd|rd|th)?)\s*(?:floor|floors)?\s*\)?",
    re.IGNORECASE,
)
TENANT_RE = re.compile(
    r"(Bachelors\s*\(Women Only\)|Bachelors\s*\(Men Only\)|Bachelors\s*\(Men/Women\)"
    r"|All|Both|Family(?:\s*Only)?)",
    re.IGNORECASE,
)
ADDITIONAL_RE = re.compile(
    r"(East|West|North|South)\s*facing|(\d+\s*(?:Covered|Open)?\s*Parking|No\s*Parking)",
    re.IGNORECASE,
)
AGE_RE = re.compile(r"(\d+\s*(?:to\s*\d+\s*)?year[s]?\s*(?:old|\+)?)", re.IGNORECASE)


@dataclass(frozen=True)
class PropertyRecord:
    property_type: str = NA
    owner_name: str = NA
    owner_contact: str = NA
    area: str = OTHER_AREA
    address: str = NA
    sub_property_type: str = NA
    size: str = NA
    furnishing_status: str = NA
    availability: str = NA
    floor: str = NA
    tenant_preference: str = NA
    additional_details: str = NA
    age: str = NA
    rent_or_sell_price: str = NA
    deposit: str = NA

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


FIELD_NAMES = tuple(f.name for f in fields(PropertyRecord))
SENTINELS = {f.name: f.default for f in fields(PropertyRecord)}


@dataclass(frozen=True)
class ExtractedMessage:
    timestamp: str
    record: PropertyRecord


# --------------------------------------------------------------------------------------
# Per-field matchers: normalized value, or None when the field pattern finds nothing

def match_property_type(text: str) -> Optional[str]:
    m = PROPERTY_TYPE_RE.search(text or "")
    if not m:
        return None
    return RESALE if m.group(1).lower() == "resale" else RENTAL


def before_property_code(text: str) -> str:
    head = PROPERTY_CODE_RE.split(text or "", maxsplit=1)[0]
    return head or (text or "")


def match_availability(text: str, vocab: Vocabulary) -> Optional[str]:
    m = vocab.availability_pattern.search(before_property_code(text))
    if not m:
        return None
    return vocab.canonical_availability(m.group(1)) or NA


def match_tenant_preference(text: str, vocab: Vocabulary) -> Optional[str]:
    m = TENANT_RE.search(before_property_code(text))
    if not m:
        return None
    value = m.group(1).strip()
    if value.lower() == "family":
        value = "Family Only"
    return vocab.canonical_tenant_preference(value) or NA


def match_owner_name(text: str) -> Optional[str]:
    m = OWNER_RE.search(text or "")
    if m and m.group(1):
        return m.group(1).strip()
    return None


def match_contact(line: str) -> Optional[str]:
    m = CONTACT_RE.search(line or "")
    return m.group(0) if m else None


def match_sub_property_type(line: str, vocab: Vocabulary) -> Optional[str]:
    m = SUB_PROPERTY_RE.search(line or "")
    if not m:
        return None
    normalized = re.sub(r"\s+", " ", f"{m.group(1).strip()} {m.group(2).upper()}").strip()
    return vocab.canonical_sub_property_type(normalized) or normalized


def match_size(line: str) -> Optional[str]:
    m = SIZE_RE.search(line or "")
    return f"{m.group(1)} sq.ft" if m else None


def match_furnishing(text: str, vocab: Vocabulary) -> Optional[str]:
    m = FURNISHING_RE.search(text or "")
    if not m:
        return None
    raw = m.group(1).strip()
    return vocab.canonical_furnishing(raw) or raw


def match_floor(line: str) -> Optional[str]:
    m = FLOOR_RE.search(line or "")
    return f"{m.group(1)} of {m.group(2)} floors" if m else None


def match_additional_details(line: str) -> Optional[str]:
    m = ADDITIONAL_RE.search(line or "")
    return m.group(0).strip() if m else None


def match_age(line: str) -> Optional[str]:
    m = AGE_RE.search(line or "")
    return m.group(1).strip() if m else None


def match_price_not_listed(line: str, vocab: Vocabulary) -> Optional[str]:
    m = vocab.price_not_listed_pattern.search(line or "")
    return m.group(1).strip() if m else None


# --------------------------------------------------------------------------------------
# Field policies

def overwrite(out: Dict[str, str], key: str, value: Optional[str]) -> bool:
    """Last match wins."""
    if value is None:
        return False
    out[key] = value
    return True


def set_once(out: Dict[str, str], key: str, value: Optional[str]) -> bool:
    """First match wins; later matches are ignored."""
    if value is None or out[key] != SENTINELS[key]:
        return False
    out[key] = value
    return True


def collect_address(lines: Sequence[str], start: int) -> List[str]:
    """Lines after the area line up to (not including) the first sub-property-type line."""
    addr = []
    for ln in lines[start:]:
        if SUB_PROPERTY_RE.search(ln):
            break
        if ln.strip():
            addr.append(ln.strip())
    return addr


# --------------------------------------------------------------------------------------
# Public API

def extract_fields(
    lines: Sequence[str], message_text: str, vocab: Optional[Vocabulary] = None
) -> PropertyRecord:
    vocab = vocab or default_vocabulary()
    lines = [ln.strip() for ln in lines if ln and ln.strip()]
    out: Dict[str, str] = dict(SENTINELS)

    # whole-message fields
    overwrite(out, "property_type", match_property_type(message_text))
    overwrite(out, "availability", match_availability(message_text, vocab))
    overwrite(out, "owner_name", match_owner_name(message_text))
    if lines:
        out["tenant_preference"] = match_tenant_preference(message_text, vocab) or NA

    prices = PriceSequence(is_rental=out["property_type"] == RENTAL)
    area_found = False
    furnishing_seen = False

    i = 0
    while i < len(lines):
        line = lines[i]

        set_once(out, "owner_contact", match_contact(line))

        if not area_found:
            area = match_area(line, vocab)
            if area:
                area_found = True
                out["area"] = area
                addr = collect_address(lines, i + 1)
                if addr:
                    out["address"] = ", ".join(addr).strip()
                # address lines are consumed along with the area line
                i += 1 + len(addr)
                continue

        overwrite(out, "sub_property_type", match_sub_property_type(line, vocab))
        overwrite(out, "size", match_size(line))
        furnishing_seen |= overwrite(out, "furnishing_status", match_furnishing(line, vocab))
        overwrite(out, "floor", match_floor(line))
        overwrite(out, "additional_details", match_additional_details(line))
        overwrite(out, "age", match_age(line))

        amount = extract_price(line)
        if amount is not None:
            prices.add_price(amount)

        phrase = match_price_not_listed(line, vocab)
        if phrase and prices.price_not_listed(phrase):
            if prices.is_rental and i + 1 < len(lines):
                months = match_deposit_months(lines[i + 1])
                if months and not prices.deposit_locked:
                    prices.lock_deposit(months)
                    i += 1

        months = match_deposit_months(line)
        if months:
            prices.deposit_months(months)

        i += 1

    if not furnishing_seen:
        overwrite(out, "furnishing_status", match_furnishing(message_text, vocab))

    overwrite(out, "rent_or_sell_price", prices.price)
    overwrite(out, "deposit", prices.deposit)
    return PropertyRecord(**out)


def message_timestamp(message: Message) -> str:
    """Normalized header, else N/A."""
    return normalize_timestamp(message.header) or NA


def extract_record(message: Message, vocab: Optional[Vocabulary] = None) -> ExtractedMessage:
    timestamp = message_timestamp(message)
    record = extract_fields(message.lines, message.text, vocab)
    logger.debug("extracted %s: %s / %s", timestamp, record.property_type, record.area)
    return ExtractedMessage(timestamp=timestamp, record=record)
