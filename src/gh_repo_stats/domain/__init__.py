from .entities import TimeWindow, ArchiveAddress, ValidatedEvent, RankedRepository, RepositoryAggregate
from .errors import DomainError, InvalidTimestampError
from .interfaces import IArchiveFetcher, IRecordStream, IResultWriter
from .services import (
    expand_addresses,
    is_valid_record,
    extract_repo_key,
    to_validated_event,
    accumulate,
    rank_repositories,
)
from .types import Granularity, GRANULARITIES
from .utils import parse_instant

__all__ = [
    "TimeWindow",
    "ArchiveAddress",
    "ValidatedEvent",
    "RankedRepository",
    "RepositoryAggregate",
    "DomainError",
    "InvalidTimestampError",
    "IArchiveFetcher",
    "IRecordStream",
    "IResultWriter",
    "expand_addresses",
    "is_valid_record",
    "extract_repo_key",
    "to_validated_event",
    "accumulate",
    "rank_repositories",
    "Granularity",
    "GRANULARITIES",
    "parse_instant",
]
