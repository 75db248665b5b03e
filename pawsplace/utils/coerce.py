from datetime import datetime, timezone
from typing import Optional

_TRUE = {"true", "t", "yes", "y", "1"}
_FALSE = {"false", "f", "no", "n", "0"}


def to_int(v) -> Optional[int]:
    try:
        if v is None or v == "" or str(v).lower() in ("null", "nan"):
            return None
        return int(float(v))
    except Exception:
        return None


def to_bool(v) -> Optional[bool]:
    if v is None:
        return None
    if isinstance(v, str):
        text = v.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        return None
    if isinstance(v, float) and v != v:
        return None
    try:
        return bool(v)
    except Exception:
        return None


def to_optional_str(v) -> Optional[str]:
    if v is None:
        return None
    if isinstance(v, float) and v != v:
        return None
    text = str(v)
    return text if text.strip() else None


def to_datetime(v) -> Optional[datetime]:
    """Parse an ISO-8601 value into an aware UTC datetime; naive values are UTC."""
    if v is None or v == "":
        return None
    if isinstance(v, datetime):
        parsed = v
    else:
        text = str(v).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
