import argparse
import logging
import sys
from typing import List, Optional
from dotenv import load_dotenv

from ..infrastructure.logging_config import configure_logging, LayerLoggerAdapter
from ..infrastructure.gharchive_source import GhArchiveFetcher
from ..infrastructure.json_stream import JsonRecordStream
from ..infrastructure.console_writer import ConsoleResultWriter
from ..application.use_cases import RepoStatsService
from ..application.errors import DataSourceError
from ..config import RunConfig
from ..domain.types import GRANULARITIES
from .controllers import StatsController, EXIT_FAILURE

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-repo-stats",
        description="Repository più attive su GHArchive in una finestra temporale, ordinate per numero di eventi.",
    )
    parser.add_argument("--after", metavar="DATETIME", help="Inizio finestra su pushed_at (default: 7 giorni fa)")
    parser.add_argument("--before", metavar="DATETIME", help="Fine finestra su pushed_at (default e massimo: ieri)")
    parser.add_argument("--event", dest="event_name", metavar="EVENT_NAME", help="Tipo di evento (default: PushEvent)")
    parser.add_argument("-n", "--count", type=int, help="Numero massimo di risultati (default: 20)")
    parser.add_argument(
        "--granularity",
        choices=GRANULARITIES,
        help="Passo tra gli archivi: ogni ora oppure una volta al giorno alla stessa ora (default: hourly)",
    )
    parser.add_argument("--timeout", type=float, help="Timeout HTTP in secondi per archivio (default: 60)")
    parser.add_argument("--base-url", help="URL base di GHArchive (default: https://data.gharchive.org)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log di debug")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    cli_logger = LayerLoggerAdapter(logging.getLogger("CLI"), {"layer": "Presentation"})
    app_logger = LayerLoggerAdapter(logging.getLogger("RepoStatsService"), {"layer": "Application"})

    def service_factory(config: RunConfig) -> RepoStatsService:
        fetcher = GhArchiveFetcher(base_url=config.base_url, timeout=config.timeout)
        return RepoStatsService(fetcher=fetcher, record_stream=JsonRecordStream(), logger=app_logger)

    controller = StatsController(service_factory, ConsoleResultWriter(), cli_logger)
    options = {
        "after": args.after,
        "before": args.before,
        "event_name": args.event_name,
        "count": args.count,
        "granularity": args.granularity,
        "base_url": args.base_url,
        "timeout": args.timeout,
    }

    try:
        return controller.run(options)
    except DataSourceError as e:
        cli_logger.critical(f"Esecuzione interrotta, nessun risultato parziale: {e}")
        return EXIT_FAILURE
    except Exception as e:
        cli_logger.critical(f"Errore fatale imprevisto: {e}", exc_info=True)
        return EXIT_FAILURE

if __name__ == "__main__":
    sys.exit(main())
