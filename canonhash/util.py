import datetime as dt
import hashlib
import math


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def iso_millis(ts: dt.datetime) -> str:
    # 2024-05-01T09:30:00.000Z; naive datetimes are taken as UTC
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=dt.timezone.utc)
    ts = ts.astimezone(dt.timezone.utc)
    return ts.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


MAX_SAFE_INTEGER = 2**53


def as_double(n: int) -> float | None:
    try:
        return float(n)
    except OverflowError:
        return None


def number_text(n: int | float) -> str:
    """Render a number the way ``Number.prototype.toString`` does.

    Floats use the shortest round-trip digits from ``repr``; plain decimal
    notation is used for decimal exponents in [-7, 21), exponent notation
    otherwise. Integers beyond 2**53 are rounded to the nearest double first;
    non-finite values and integers too large for a double render ``null``.
    """
    if isinstance(n, bool):
        return "true" if n else "false"
    if isinstance(n, int):
        if abs(n) <= MAX_SAFE_INTEGER:
            return str(n)
        n = as_double(n)
        if n is None:
            return "null"
    if not math.isfinite(n):
        return "null"
    if n == 0:
        return "0"

    sign = "-" if n < 0 else ""
    text = repr(abs(n))
    if "e" in text:
        mantissa, _, exp_text = text.partition("e")
        exp = int(exp_text)
    else:
        mantissa, exp = text, 0
    whole, _, frac = mantissa.partition(".")
    digits = whole + frac
    # value == 0.<digits> * 10**point
    point = len(whole) + exp
    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        out = digits + "0" * (point - k)
    elif 0 < point <= 21:
        out = digits[:point] + "." + digits[point:]
    elif -6 < point <= 0:
        out = "0." + "0" * (-point) + digits
    else:
        e = point - 1
        e_text = ("+" if e >= 0 else "-") + str(abs(e))
        if k == 1:
            out = digits + "e" + e_text
        else:
            out = digits[0] + "." + digits[1:] + "e" + e_text
    return sign + out
