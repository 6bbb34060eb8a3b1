from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Tuple
from ..domain.entities import ArchiveAddress, RankedRepository, RepositoryAggregate

if TYPE_CHECKING:
    from ..config import RunConfig

class IRepoStatsUseCase(ABC):
    @abstractmethod
    def run(self, config: "RunConfig") -> List[RankedRepository]:
        pass

    @abstractmethod
    def process_address(self, address: ArchiveAddress, config: "RunConfig", aggregate: RepositoryAggregate) -> Tuple[int, int]:
        pass
