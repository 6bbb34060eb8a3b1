import gzip
import json
import pytest
from datetime import datetime, timezone

from gh_repo_stats.config import RunConfig
from gh_repo_stats.domain.entities import TimeWindow

@pytest.fixture
def run_config():
    """Finestra 2023-01-01 -> 2023-01-03 (UTC) su PushEvent, top 10."""
    return RunConfig(
        window=TimeWindow(
            after=datetime(2023, 1, 1, tzinfo=timezone.utc),
            before=datetime(2023, 1, 3, tzinfo=timezone.utc),
        ),
        event_name="PushEvent",
        count=10,
    )

@pytest.fixture
def make_record():
    def _make(url="https://github.com/a/b", pushed_at="2023-01-02T00:00:00Z", event_type="PushEvent"):
        return {
            "type": event_type,
            "actor": "someone",
            "repository": {"url": url, "pushed_at": pushed_at, "name": url.rsplit("/", 1)[-1]},
        }
    return _make

@pytest.fixture
def ndjson_gz():
    """Comprime una lista di record nel formato degli archivi GHArchive (.json.gz, un record per riga)."""
    def _build(records):
        payload = "".join(json.dumps(record) + "\n" for record in records)
        return gzip.compress(payload.encode("utf-8"))
    return _build
