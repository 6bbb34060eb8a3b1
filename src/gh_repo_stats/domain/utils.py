from datetime import datetime, timezone

from .errors import InvalidTimestampError

_LEGACY_FORMATS = (
    "%Y/%m/%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M:%S %z",
)

def parse_instant(value: str) -> datetime:
    if not isinstance(value, str) or not value.strip():
        raise InvalidTimestampError(f"Istante non valido: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = None
        # formato storico di GHArchive (es. 2012/03/13 14:20:01 -0700)
        for fmt in _LEGACY_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
        if parsed is None:
            raise InvalidTimestampError(f"Istante non valido: {value!r}") from None

    return ensure_utc(parsed)

def ensure_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)

def truncate_to_hour(moment: datetime) -> datetime:
    return ensure_utc(moment).replace(minute=0, second=0, microsecond=0)
