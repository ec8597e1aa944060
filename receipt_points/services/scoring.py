# scoring.py
from __future__ import annotations
import math
import string
from datetime import date, time
from typing import Dict, Sequence

from ..schemas import Item, Receipt

# -----------------------------
# Tunables
# -----------------------------
POINTS = {
    "round_dollar": 50,
    "quarter_multiple": 25,
    "item_pair": 5,
    "odd_day": 6,
    "afternoon": 10,
}

ROUND_DOLLAR_SUFFIX = ".00"
QUARTER_CENTS = 25
DESCRIPTION_LENGTH_MULTIPLE = 3
DESCRIPTION_PRICE_FACTOR = 0.2
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16  # exclusive

ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)

# Unicode White_Space, without the ASCII separators \x1c-\x1f that str.strip() also removes
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)

# Fallbacks for unparsable fields; same as a zero calendar/clock value.
ZERO_DATE = date.min  # 0001-01-01, day 1 counts as odd
ZERO_TIME = time.min

# -----------------------------
# Lenient parsers
# Bad input never raises; it degrades to a zero value.
# -----------------------------
def _is_digits(text: str) -> bool:
    return bool(text) and text.isascii() and text.isdigit()

def parse_amount(text: str) -> float:
    """Decimal string -> float, 0.0 when it can't be read."""
    if not text or text != text.strip() or "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0

def parse_purchase_date(text: str) -> date:
    """Strict YYYY-MM-DD."""
    if len(text) != 10 or text[4] != "-" or text[7] != "-":
        return ZERO_DATE
    y, m, d = text[0:4], text[5:7], text[8:10]
    if not (_is_digits(y) and _is_digits(m) and _is_digits(d)):
        return ZERO_DATE
    try:
        # year 0000 is a leap year, like 2000
        return date(int(y) or 2000, int(m), int(d))
    except ValueError:
        return ZERO_DATE

def parse_purchase_time(text: str) -> time:
    """H:MM or HH:MM, 24h clock."""
    hh, sep, mm = text.partition(":")
    if not sep or len(hh) not in (1, 2) or len(mm) != 2:
        return ZERO_TIME
    if not (_is_digits(hh) and _is_digits(mm)):
        return ZERO_TIME
    hour, minute = int(hh), int(mm)
    if hour > 23 or minute > 59:
        return ZERO_TIME
    return time(hour, minute)

# -----------------------------
# Rules
# -----------------------------
def retailer_points(retailer: str) -> int:
    return sum(1 for ch in retailer if ch in ALPHANUMERIC)

def round_dollar_points(total: str) -> int:
    # textual check; "12.00" qualifies, "12.0" and "12" don't
    return POINTS["round_dollar"] if total.endswith(ROUND_DOLLAR_SUFFIX) else 0

def quarter_multiple_points(total: str) -> int:
    cents = parse_amount(total) * 100
    if math.isfinite(cents) and math.fmod(cents, QUARTER_CENTS) == 0:
        return POINTS["quarter_multiple"]
    return 0

def item_pair_points(items: Sequence[Item]) -> int:
    return (len(items) // 2) * POINTS["item_pair"]

def item_description_points(item: Item) -> int:
    """
    ceil(price * 0.2) when the trimmed description's length is a multiple of 3.
    Length is measured in UTF-8 bytes; an empty description (length 0) qualifies.
    """
    trimmed = item.shortDescription.strip(WHITESPACE)
    if len(trimmed.encode("utf-8")) % DESCRIPTION_LENGTH_MULTIPLE != 0:
        return 0
    bonus = parse_amount(item.price) * DESCRIPTION_PRICE_FACTOR
    if not math.isfinite(bonus):
        return 0
    return int(math.ceil(bonus))

def odd_day_points(purchase_date: str) -> int:
    return POINTS["odd_day"] if parse_purchase_date(purchase_date).day % 2 == 1 else 0

def afternoon_points(purchase_time: str) -> int:
    hour = parse_purchase_time(purchase_time).hour
    return POINTS["afternoon"] if AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR else 0

# -----------------------------
# Main entry
# -----------------------------
def score_breakdown(receipt: Receipt) -> Dict[str, int]:
    """
    Returns each rule's contribution, keyed by rule name:
      retailer, round_dollar, quarter_multiple, item_pairs,
      item_descriptions, odd_day, afternoon
    """
    return {
        "retailer": retailer_points(receipt.retailer),
        "round_dollar": round_dollar_points(receipt.total),
        "quarter_multiple": quarter_multiple_points(receipt.total),
        "item_pairs": item_pair_points(receipt.items),
        "item_descriptions": sum(item_description_points(i) for i in receipt.items),
        "odd_day": odd_day_points(receipt.purchaseDate),
        "afternoon": afternoon_points(receipt.purchaseTime),
    }

def calculate_points(receipt: Receipt) -> int:
    return sum(score_breakdown(receipt).values())
