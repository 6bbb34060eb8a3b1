from .use_cases import RepoStatsService
from .interfaces import IRepoStatsUseCase
from .errors import RepoStatsError, ConfigError, DataSourceError, FetchError, DecompressError, ParseError

__all__ = [
    "RepoStatsService",
    "IRepoStatsUseCase",
    "RepoStatsError",
    "ConfigError",
    "DataSourceError",
    "FetchError",
    "DecompressError",
    "ParseError",
]
