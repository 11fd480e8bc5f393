"""
Seed Haven - Shared Helpers
=============================
Pure utility functions with NO database or module dependencies.
"""

import re
import uuid
from datetime import date
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional


def today_iso() -> str:
    """Returns today's date as YYYY-MM-DD."""
    return date.today().isoformat()


def generate_id(prefix: str) -> str:
    """Generate a unique record id such as 'order-3f9c...'."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def safe_decimal(value) -> Optional[Decimal]:
    """Safely convert a value to Decimal. Returns None on failure."""
    if value is None:
        return None
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None


def format_money(value) -> str:
    """Format a Decimal amount as dollars rounded to cents: 23.628 -> '$23.63'."""
    d = safe_decimal(value) or Decimal("0")
    return "${:,.2f}".format(d.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


_NON_DIGITS = re.compile(r"\D")


def last4(number: str) -> str:
    """Keep only the last four digits of a card or account number."""
    return _NON_DIGITS.sub("", number or "")[-4:]


def mask_number(number: str) -> str:
    """Mask all but the last four characters: '021000021' -> '•••••0021'."""
    number = number or ""
    return "•" * max(len(number) - 4, 0) + number[-4:]


def is_blank(value) -> bool:
    return value is None or not str(value).strip()
