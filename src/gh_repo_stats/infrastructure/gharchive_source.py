import gzip
import logging
import zlib
from typing import BinaryIO, Iterator

import requests
from requests.exceptions import Timeout, ConnectionError as ConnErr, RequestException, HTTPError
from urllib3.exceptions import HTTPError as TransportError

from ..domain.entities import ArchiveAddress
from ..domain.interfaces import IArchiveFetcher
from ..application.errors import FetchError, DecompressError
from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

class GhArchiveFetcher(IArchiveFetcher):
    """
    Scarica gli archivi orari di GHArchive (.json.gz) in streaming.

    Nessun retry e nessuna cache: il primo errore di rete, di stato HTTP
    o di decompressione interrompe l'intera esecuzione.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT, chunk_size: int = 64 * 1024):
        self.base_url = base_url
        self.timeout = timeout
        self.chunk_size = chunk_size
        self.logger = logging.getLogger(self.__class__.__name__)

    def fetch(self, address: ArchiveAddress) -> BinaryIO:
        url = address.url(self.base_url)
        try:
            response = requests.get(url, stream=True, timeout=self.timeout)
        except (Timeout, ConnErr, RequestException) as error:
            raise FetchError(f"Impossibile scaricare {url}: {error}") from error

        try:
            response.raise_for_status()
        except HTTPError as error:
            # in streaming la connessione resta aperta finché non viene chiusa
            response.close()
            raise FetchError(f"Impossibile scaricare {url}: {error}") from error
        self.logger.debug(f"Connessione aperta verso {url} (status {response.status_code})")
        return response.raw

    def decompress(self, stream: BinaryIO) -> Iterator[bytes]:
        try:
            with gzip.GzipFile(fileobj=stream, mode="rb") as gz_file:
                while True:
                    chunk = gz_file.read(self.chunk_size)
                    if not chunk:
                        return
                    yield chunk
        except TransportError as error:
            raise FetchError(f"Download interrotto durante la lettura: {error}") from error
        except (OSError, EOFError, zlib.error) as error:
            raise DecompressError(f"Archivio gzip non valido o troncato: {error}") from error
        finally:
            stream.close()
