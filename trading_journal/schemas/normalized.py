"""
Lenient normalization of external input

Webhook senders and the trade form are not trusted to format numbers and
dates correctly. Malformed values are absorbed into defaults instead of
rejecting the request; each helper reports whether it fell back so callers
can log it.

Conventions:
- Decimals: str/int/float/Decimal, surrounding whitespace ignored, NaN/inf rejected
- Timestamps: datetime, ISO-8601 string (``Z`` suffix allowed) or epoch number
- Naive datetimes are UTC
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable, NamedTuple, Optional

# Epoch values above this are milliseconds (JavaScript Date.now())
_EPOCH_MILLIS_THRESHOLD = 100_000_000_000

# Signed 32-bit INTEGER column range
INT32_MAX = 2**31 - 1


class Parsed(NamedTuple):
    value: Any
    defaulted: bool


def quantize(value: Decimal, places: int) -> Decimal:
    """Round half-up to a fixed number of fractional digits."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _to_decimal(raw: Any, places: Optional[int] = None, max_digits: Optional[int] = None) -> Optional[Decimal]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        candidate = raw
    elif isinstance(raw, int):
        candidate = Decimal(raw)
    elif isinstance(raw, float):
        candidate = Decimal(str(raw))
    elif isinstance(raw, str):
        stripped = raw.strip()
        if not stripped:
            return None
        try:
            candidate = Decimal(stripped)
        except InvalidOperation:
            return None
    else:
        return None
    if not candidate.is_finite():
        return None
    if places is not None:
        try:
            candidate = quantize(candidate, places)
        except InvalidOperation:
            return None
    if max_digits is not None and places is not None:
        # integer part must fit NUMERIC(max_digits, places)
        if abs(candidate) >= Decimal(10) ** (max_digits - places):
            return None
    return candidate


def parse_decimal(
    raw: Any,
    default: Decimal = Decimal("0"),
    places: Optional[int] = None,
    max_digits: Optional[int] = None,
) -> Parsed:
    """Parse a required decimal, falling back to ``default`` (also when it overflows ``max_digits``)."""
    value = _to_decimal(raw, places, max_digits)
    if value is None:
        return Parsed(default, True)
    return Parsed(value, False)


def parse_optional_decimal(raw: Any, places: Optional[int] = None, max_digits: Optional[int] = None) -> Parsed:
    """
    Parse an optional decimal.

    Absent or blank input is a legitimate ``None`` (not defaulted);
    present but unparseable input becomes ``None`` and is flagged.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return Parsed(None, False)
    value = _to_decimal(raw, places, max_digits)
    if value is None:
        return Parsed(None, True)
    return Parsed(value, False)


def parse_optional_int(raw: Any) -> Parsed:
    """
    Parse an optional integer id; ``"12"`` and ``12.0`` both give 12.

    Values outside the signed 32-bit range cannot name a stored row and
    are flagged as unparseable.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return Parsed(None, False)
    value = _to_decimal(raw)
    if value is None or value != value.to_integral_value():
        return Parsed(None, True)
    if not -INT32_MAX - 1 <= value <= INT32_MAX:
        return Parsed(None, True)
    return Parsed(int(value), False)


def _to_datetime(raw: Any) -> Optional[datetime]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, (int, float)) or (isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit()):
        try:
            number = float(raw)
            if number > _EPOCH_MILLIS_THRESHOLD:
                number /= 1000
            parsed = datetime.fromtimestamp(number, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(raw, str):
        text = raw.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_timestamp(raw: Any, now: Callable[[], datetime]) -> Parsed:
    """Parse a claimed event time, falling back to ``now()``."""
    value = _to_datetime(raw)
    if value is None:
        return Parsed(now(), True)
    return Parsed(value, False)


def parse_text(raw: Any, default: str, max_length: Optional[int] = None) -> Parsed:
    """
    Coerce to a non-empty string.

    Empty or missing input takes ``default``; over-long input is cut to
    ``max_length`` and flagged.
    """
    if raw is None or isinstance(raw, (dict, list)):
        return Parsed(default, True)
    text = str(raw).strip()
    if not text:
        return Parsed(default, True)
    if max_length is not None and len(text) > max_length:
        return Parsed(text[:max_length], True)
    return Parsed(text, False)


def parse_optional_text(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


__all__ = [
    "INT32_MAX",
    "Parsed",
    "quantize",
    "parse_decimal",
    "parse_optional_decimal",
    "parse_optional_int",
    "parse_timestamp",
    "parse_text",
    "parse_optional_text",
]
