import io
import json
import pytest
from dataclasses import replace
from datetime import datetime, timezone
from unittest.mock import Mock

from gh_repo_stats.application.use_cases import RepoStatsService
from gh_repo_stats.application.errors import FetchError, DecompressError, ParseError
from gh_repo_stats.domain.entities import ArchiveAddress, RankedRepository, RepositoryAggregate
from gh_repo_stats.infrastructure.json_stream import JsonRecordStream
from gh_repo_stats.infrastructure.console_writer import format_result_line

@pytest.fixture
def archives():
    """Contenuto (NDJSON già decompresso) per stamp orario; le ore assenti sono archivi vuoti."""
    return {}

@pytest.fixture
def fetcher(archives):
    fetcher = Mock()
    fetcher.fetch.side_effect = lambda address: io.BytesIO(archives.get(address.stamp, b""))
    fetcher.decompress.side_effect = lambda stream: iter([stream.read()])
    return fetcher

def _ndjson(records):
    return "".join(json.dumps(record) + "\n" for record in records).encode("utf-8")

class TestRepoStatsService:
    def test_two_archives_end_to_end(self, fetcher, archives, run_config, make_record):
        archives["2023-01-01-0"] = _ndjson([make_record(url="https://github.com/a/b")] * 3)
        archives["2023-01-01-1"] = _ndjson([make_record(url="https://github.com/a/c")])

        service = RepoStatsService(fetcher, JsonRecordStream())
        results = service.run(run_config)

        assert results == [RankedRepository("a/b", 3), RankedRepository("a/c", 1)]
        assert [format_result_line(entry) for entry in results] == ["a/b: 3 events", "a/c: 1 events"]
        # finestra oraria inclusiva: 2 giorni pieni + l'ora 0 del terzo
        assert fetcher.fetch.call_count == 49

    def test_addresses_processed_in_order(self, fetcher, run_config):
        config = replace(run_config, granularity="daily")
        RepoStatsService(fetcher, JsonRecordStream()).run(config)

        stamps = [call.args[0].stamp for call in fetcher.fetch.call_args_list]
        assert stamps == ["2023-01-01-0", "2023-01-02-0", "2023-01-03-0"]

    def test_other_events_are_ignored(self, fetcher, archives, run_config, make_record):
        archives["2023-01-02-5"] = _ndjson([
            make_record(url="https://github.com/a/b", event_type="WatchEvent"),
            make_record(url="https://github.com/a/b", pushed_at="2024-01-01T00:00:00Z"),
            {"type": "PushEvent"},
            make_record(url="http://github.com/x/y"),
        ])

        results = RepoStatsService(fetcher, JsonRecordStream()).run(run_config)

        assert results == [RankedRepository("x/y", 1)]

    def test_count_limits_results(self, fetcher, archives, run_config, make_record):
        archives["2023-01-01-3"] = _ndjson([make_record(url=f"https://github.com/o/r{i}") for i in range(5)])
        config = replace(run_config, count=2)

        results = RepoStatsService(fetcher, JsonRecordStream()).run(config)

        assert [entry.repo_key for entry in results] == ["o/r0", "o/r1"]

    def test_process_address_returns_counters(self, fetcher, archives, run_config, make_record):
        archives["2023-01-02-0"] = _ndjson([make_record(), make_record(event_type="ForkEvent")])
        aggregate = RepositoryAggregate()
        address = ArchiveAddress(hour=datetime(2023, 1, 2, 0, tzinfo=timezone.utc))

        parsed, accepted = RepoStatsService(fetcher, JsonRecordStream()).process_address(address, run_config, aggregate)

        assert (parsed, accepted) == (2, 1)
        assert aggregate.count_for("a/b") == 1

    def test_fetch_error_aborts_run(self, fetcher, run_config):
        """
        Politica fail-fast:
        1. Il primo errore di download interrompe l'esecuzione
        2. Nessun altro archivio viene richiesto
        """
        fetcher.fetch.side_effect = FetchError("404 Client Error")

        with pytest.raises(FetchError):
            RepoStatsService(fetcher, JsonRecordStream()).run(run_config)
        assert fetcher.fetch.call_count == 1

    def test_decompress_error_propagates(self, fetcher, run_config):
        fetcher.decompress.side_effect = DecompressError("Not a gzipped file")

        with pytest.raises(DecompressError):
            RepoStatsService(fetcher, JsonRecordStream()).run(run_config)

    def test_bad_pushed_at_becomes_parse_error(self, fetcher, archives, run_config, make_record):
        archives["2023-01-01-0"] = _ndjson([make_record(), make_record(pushed_at="not-a-date")])

        with pytest.raises(ParseError, match="2023-01-01-0"):
            RepoStatsService(fetcher, JsonRecordStream()).run(run_config)

    def test_malformed_archive_aborts(self, fetcher, archives, run_config):
        archives["2023-01-01-0"] = b'{"type": "PushEvent"}\n{"type": '

        with pytest.raises(ParseError):
            RepoStatsService(fetcher, JsonRecordStream()).run(run_config)
        assert fetcher.fetch.call_count == 1
