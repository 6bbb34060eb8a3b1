import math
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple, Union

from .application.errors import ConfigError
from .domain.entities import TimeWindow
from .domain.errors import InvalidTimestampError
from .domain.types import GRANULARITIES, Granularity
from .domain.utils import ensure_utc, parse_instant

DEFAULT_BASE_URL = "https://data.gharchive.org"
DEFAULT_EVENT_NAME = "PushEvent"
DEFAULT_COUNT = 20
DEFAULT_TIMEOUT = 60
DEFAULT_GRANULARITY: Granularity = "hourly"

DEFAULT_LOOKBACK = timedelta(days=7)
# l'archivio del giorno corrente potrebbe non essere ancora pubblicato
PUBLICATION_DELAY = timedelta(days=1)

InstantInput = Union[str, datetime, None]

@dataclass(frozen=True)
class RunConfig:
    """
    Parametri di una singola esecuzione della pipeline di classifica.

    Viene costruita e validata prima di qualsiasi download: una RunConfig
    esistente garantisce window.after <= window.before e count >= 1.
    """

    # --- Finestra temporale su repository.pushed_at (estremi inclusi) ---
    window: TimeWindow

    # --- Filtro e classifica ---
    event_name: str = DEFAULT_EVENT_NAME
    count: int = DEFAULT_COUNT

    # --- Sorgente GHArchive ---
    granularity: Granularity = DEFAULT_GRANULARITY
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def resolve_window(after: InstantInput, before: InstantInput, now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    now = ensure_utc(now or datetime.now(timezone.utc))
    latest_allowed = now - PUBLICATION_DELAY

    after_dt = _to_instant(after, "after") if after is not None else now - DEFAULT_LOOKBACK
    before_dt = _to_instant(before, "before") if before is not None else latest_allowed

    if before_dt > latest_allowed:
        before_dt = latest_allowed
    return after_dt, before_dt


def build_run_config(
    after: InstantInput = None,
    before: InstantInput = None,
    event_name: Optional[str] = None,
    count: Optional[int] = None,
    granularity: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    now: Optional[datetime] = None,
) -> RunConfig:
    after_dt, before_dt = resolve_window(after, before, now)

    if before_dt < after_dt:
        raise ConfigError("Begin Date is after the End Date")

    count = DEFAULT_COUNT if count is None else count
    if int(count) < 1:
        raise ConfigError("Count must be a positive number")

    granularity = granularity or os.environ.get("REPO_STATS_GRANULARITY", DEFAULT_GRANULARITY)
    if granularity not in GRANULARITIES:
        raise ConfigError(f"Granularity must be one of: {', '.join(GRANULARITIES)}")

    if timeout is None:
        timeout = _env_timeout()
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError("Timeout must be a positive number")

    return RunConfig(
        window=TimeWindow(after=after_dt, before=before_dt),
        event_name=event_name or DEFAULT_EVENT_NAME,
        count=int(count),
        granularity=granularity,
        base_url=base_url or os.environ.get("GH_ARCHIVE_BASE_URL", DEFAULT_BASE_URL),
        timeout=timeout,
    )


def _to_instant(value: Union[str, datetime], label: str) -> datetime:
    if isinstance(value, datetime):
        return ensure_utc(value)
    try:
        return parse_instant(value)
    except InvalidTimestampError as error:
        raise ConfigError(f"Invalid {label} date: {value!r}") from error


def _env_timeout() -> float:
    raw_value = os.environ.get("GH_ARCHIVE_TIMEOUT")
    if not raw_value:
        return DEFAULT_TIMEOUT
    try:
        return float(raw_value)
    except ValueError as error:
        raise ConfigError(f"GH_ARCHIVE_TIMEOUT non numerico: {raw_value!r}") from error
