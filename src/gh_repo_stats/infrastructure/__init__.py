from .gharchive_source import GhArchiveFetcher
from .json_stream import JsonRecordStream
from .console_writer import ConsoleResultWriter, format_result_line
from .logging_config import configure_logging, LayerLoggerAdapter

__all__ = [
    "GhArchiveFetcher",
    "JsonRecordStream",
    "ConsoleResultWriter",
    "format_result_line",
    "configure_logging",
    "LayerLoggerAdapter",
]
