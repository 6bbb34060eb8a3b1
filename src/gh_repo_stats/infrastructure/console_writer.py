import sys
from typing import List, Optional, TextIO

from ..domain.entities import RankedRepository
from ..domain.interfaces import IResultWriter

def format_result_line(entry: RankedRepository) -> str:
    return f"{entry.repo_key}: {entry.count} events"

class ConsoleResultWriter(IResultWriter):
    """Stampa la classifica su stdout, una riga per repository; i log restano su stderr."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write(self, results: List[RankedRepository]) -> None:
        output = self.stream or sys.stdout
        for entry in results:
            output.write(format_result_line(entry) + "\n")
        output.flush()
