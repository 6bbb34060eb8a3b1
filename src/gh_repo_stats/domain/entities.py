from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterator, Tuple

@dataclass(frozen=True)
class TimeWindow:
    after: datetime
    before: datetime

    def contains(self, moment: datetime) -> bool:
        return self.after <= moment <= self.before

@dataclass(frozen=True, order=True)
class ArchiveAddress:
    """Un archivio orario di GHArchive, identificato da data e ora UTC."""
    hour: datetime

    @property
    def stamp(self) -> str:
        # GHArchive non usa lo zero padding sull'ora (2024-01-01-1, non 2024-01-01-01)
        return f"{self.hour.strftime('%Y-%m-%d')}-{self.hour.hour}"

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/{self.stamp}.json.gz"

@dataclass(frozen=True)
class ValidatedEvent:
    repo_key: str

@dataclass(frozen=True)
class RankedRepository:
    repo_key: str
    count: int

class RepositoryAggregate:
    """
    Conteggio degli eventi per repository accumulato durante una singola esecuzione.

    L'ordine di inserimento delle chiavi è preservato: a parità di conteggio
    la classifica mantiene l'ordine in cui le repository sono state incontrate.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}

    def increment(self, repo_key: str) -> int:
        self._counts[repo_key] = self._counts.get(repo_key, 0) + 1
        return self._counts[repo_key]

    def count_for(self, repo_key: str) -> int:
        return self._counts.get(repo_key, 0)

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self._counts.items())

    def total_events(self) -> int:
        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, repo_key: object) -> bool:
        return repo_key in self._counts
