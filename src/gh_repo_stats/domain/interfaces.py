from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Iterable, Iterator, List
from .entities import ArchiveAddress, RankedRepository

class IArchiveFetcher(ABC):
    @abstractmethod
    def fetch(self, address: ArchiveAddress) -> BinaryIO:
        pass

    @abstractmethod
    def decompress(self, stream: BinaryIO) -> Iterator[bytes]:
        pass

class IRecordStream(ABC):
    @abstractmethod
    def parse(self, chunks: Iterable[bytes]) -> Iterator[Any]:
        pass

class IResultWriter(ABC):
    @abstractmethod
    def write(self, results: List[RankedRepository]) -> None:
        pass
