# modules/price_extractor.py - per-line price amounts + rent/deposit sequencing
# Public API: extract_price(line) -> Optional[float], format_amount(val), PriceSequence
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

# 25K / 1.2 Lac / 95 L / 1.5 Cr / 1.5 C r / 18000 Rs
UNIT_PRICE_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(K|Lac|Lacs|L|Cr|C\s*r|Rs)", re.IGNORECASE)

# Rent 25000 / Deposit: 50,000 / Rs. 18,000 / Price 95,00,000 (no unit -> rupees)
LABELLED_PRICE_RE = re.compile(
    r"\b(?:Rent|Deposit|Price|Rs\.?|INR)\s*[:\-=]?\s*(?:Rs\.?\s*)?"
    r"(\d{1,3}(?:,\d{2,3})+|\d{3,})(\.\d+)?",
    re.IGNORECASE,
)

DEPOSIT_MONTH_RE = re.compile(r"(\d+\s*Month)", re.IGNORECASE)

_MULTIPLIERS = {
    "k": 1_000,
    "lac": 100_000,
    "lacs": 100_000,
    "l": 100_000,
    "cr": 10_000_000,
    "rs": 1,
}


def _round_val(val: Optional[float]) -> Optional[float]:
    if val is None:
        return None
    r = round(val, 2)
    if abs(r - int(r)) < 1e-9:
        return float(int(r))
    return r


def unit_multiplier(unit: str) -> int:
    key = re.sub(r"\s+", "", (unit or "").lower())
    return _MULTIPLIERS.get(key, 1)


def extract_price(line: str) -> Optional[float]:
    """Rupee amount carried by `line`, or None when the line has no price."""
    m = UNIT_PRICE_RE.search(line or "")
    if m:
        return _round_val(float(m.group(1)) * unit_multiplier(m.group(2)))
    m = LABELLED_PRICE_RE.search(line or "")
    if m:
        return _round_val(float(m.group(1).replace(",", "") + (m.group(2) or "")))
    return None


def format_amount(val: float) -> str:
    r = _round_val(val)
    if r is None:
        return ""
    return str(int(r)) if r == int(r) else str(r)


def match_deposit_months(line: str) -> Optional[str]:
    m = DEPOSIT_MONTH_RE.search(line or "")
    return m.group(1).strip() if m else None


@dataclass
class PriceSequence:
    """
    Ordered price state for one message.
    1st numeric price -> rent_or_sell_price; 2nd (rentals only) -> deposit, which then locks.
    A "price on call" phrase fills the price only while no numeric price has been seen.
    """

    is_rental: bool
    prices: List[float] = field(default_factory=list)
    price: Optional[str] = None
    deposit: Optional[str] = None
    deposit_locked: bool = False
    price_not_listed_found: bool = False

    def add_price(self, amount: float) -> None:
        self.prices.append(amount)
        if self.deposit_locked:
            return
        if len(self.prices) == 1:
            self.price = format_amount(amount)
        elif len(self.prices) == 2 and self.is_rental:
            self.lock_deposit(format_amount(amount))

    def lock_deposit(self, value: str) -> None:
        self.deposit = value
        self.deposit_locked = True

    def price_not_listed(self, phrase: str) -> bool:
        """Record a price-not-listed phrase; True when it was accepted."""
        if self.prices or self.price_not_listed_found:
            return False
        self.price = phrase.strip()
        self.price_not_listed_found = True
        return True

    def deposit_months(self, value: str) -> bool:
        """A month-count deposit after exactly one numeric price (rentals only)."""
        if self.deposit_locked or not self.is_rental or len(self.prices) != 1:
            return False
        self.lock_deposit(value)
        return True
