import re
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .entities import ArchiveAddress, RankedRepository, RepositoryAggregate, ValidatedEvent
from .types import Granularity
from .utils import parse_instant, truncate_to_hour

if TYPE_CHECKING:
    from ..config import RunConfig

_GITHUB_HOST_PREFIX = re.compile(r"^https?://github\.com/")

_GRANULARITY_STEPS: Dict[str, timedelta] = {
    "hourly": timedelta(hours=1),
    "daily": timedelta(days=1),
}

def expand_addresses(after: datetime, before: datetime, granularity: Granularity = "hourly") -> List[ArchiveAddress]:
    """
    Espande la finestra [after, before] nella sequenza ordinata di archivi orari da scaricare.

    Entrambi gli estremi sono inclusi. Con granularità "daily" l'ora resta fissata
    a quella di `after`, quindi l'ultimo indirizzo può precedere l'ora di `before`.
    Se after > before la sequenza è vuota: la validazione spetta al chiamante.
    """
    step = _GRANULARITY_STEPS[granularity]
    end_time = truncate_to_hour(before)
    current_time = truncate_to_hour(after)

    addresses: List[ArchiveAddress] = []
    while current_time <= end_time:
        addresses.append(ArchiveAddress(hour=current_time))
        current_time += step
    return addresses

def is_valid_record(record: Any, config: "RunConfig") -> bool:
    if not isinstance(record, dict) or record.get("type") != config.event_name:
        return False

    repository = record.get("repository")
    if not isinstance(repository, dict):
        return False
    if repository.get("url") is None or repository.get("pushed_at") is None:
        return False

    # un pushed_at illeggibile non è uno scarto: InvalidTimestampError risale al chiamante
    pushed_at = parse_instant(repository["pushed_at"])
    return config.window.contains(pushed_at)

def extract_repo_key(url: str) -> str:
    return _GITHUB_HOST_PREFIX.sub("", url, count=1)

def to_validated_event(record: Dict[str, Any]) -> ValidatedEvent:
    return ValidatedEvent(repo_key=extract_repo_key(str(record["repository"]["url"])))

def accumulate(record: Any, config: "RunConfig", aggregate: RepositoryAggregate) -> Optional[ValidatedEvent]:
    if not is_valid_record(record, config):
        return None
    event = to_validated_event(record)
    aggregate.increment(event.repo_key)
    return event

def rank_repositories(aggregate: RepositoryAggregate, limit: int) -> List[RankedRepository]:
    # sorted è stabile anche con reverse=True: a parità vince la prima repository incontrata
    ordered = sorted(aggregate.items(), key=lambda item: item[1], reverse=True)
    return [RankedRepository(repo_key=key, count=count) for key, count in ordered[:limit]]
