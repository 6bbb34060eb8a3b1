import codecs
import json
import re
from typing import Any, Generator, Iterable, Iterator

from ..domain.interfaces import IRecordStream
from ..application.errors import ParseError

_WHITESPACE = re.compile(r"[ \t\n\r]*")
_NUMBER_TAIL = re.compile(r"(?:\.\d*)?(?:[eE][-+]?\d*)?")

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)

class JsonRecordStream(IRecordStream):
    """
    Decodifica incrementale di una sequenza di valori JSON concatenati.

    L'archivio non è un unico documento ma una serie di valori top-level
    (tipicamente uno per riga). Ogni valore viene emesso appena completo,
    mantenendo in memoria al massimo il valore ancora parziale.

    Args:
        max_pending_chars: Dimensione massima di un valore non ancora completo.
            Oltre questa soglia il contenuto è considerato malformato.
    """

    def __init__(self, max_pending_chars: int = 16 * 1024 * 1024):
        self.max_pending_chars = max_pending_chars
        self._decoder = json.JSONDecoder()

    def parse(self, chunks: Iterable[bytes]) -> Iterator[Any]:
        text_decoder = codecs.getincrementaldecoder("utf-8")()
        pending = ""

        for chunk in chunks:
            try:
                pending += text_decoder.decode(chunk)
            except UnicodeDecodeError as error:
                raise ParseError(f"Contenuto non UTF-8: {error}") from error

            pending = yield from self._drain(pending, final=False)
            if len(pending) > self.max_pending_chars:
                raise ParseError(
                    f"Valore JSON incompleto oltre {self.max_pending_chars} caratteri: contenuto malformato"
                )

        try:
            pending += text_decoder.decode(b"", final=True)
        except UnicodeDecodeError as error:
            raise ParseError(f"Sequenza UTF-8 troncata a fine stream: {error}") from error

        yield from self._drain(pending, final=True)

    def _drain(self, buffer: str, final: bool) -> Generator[Any, None, str]:
        """Emette i valori completi presenti nel buffer e restituisce la parte residua."""
        position = 0
        length = len(buffer)

        while True:
            position = _WHITESPACE.match(buffer, position).end()
            if position >= length:
                return ""

            try:
                value, end = self._decoder.raw_decode(buffer, position)
            except json.JSONDecodeError as error:
                # un valore troncato fallisce sul suo ultimo token, che non contiene mai un a capo
                if final or buffer.find("\n", error.pos) != -1:
                    raise ParseError(f"JSON malformato (riga {error.lineno}, colonna {error.colno}): {error.msg}") from error
                return buffer[position:]

            # un numero a fine buffer potrebbe continuare nel chunk successivo (es. 12|34, 1.|5, 1e|3)
            if not final and _is_number(value) and _NUMBER_TAIL.fullmatch(buffer, end):
                return buffer[position:]

            yield value
            position = end
