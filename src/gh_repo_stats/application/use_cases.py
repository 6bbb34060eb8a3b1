import logging
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from .interfaces import IRepoStatsUseCase
from .errors import ParseError
from ..domain.entities import ArchiveAddress, RankedRepository, RepositoryAggregate
from ..domain.errors import InvalidTimestampError
from ..domain.interfaces import IArchiveFetcher, IRecordStream
from ..domain import services as domain_services

if TYPE_CHECKING:
    from ..config import RunConfig

class RepoStatsService(IRepoStatsUseCase):
    def __init__(
        self,
        fetcher: IArchiveFetcher,
        record_stream: IRecordStream,
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None
    ):
        self.fetcher = fetcher
        self.record_stream = record_stream
        self.logger = logger or logging.getLogger(__name__)

    def run(self, config: "RunConfig") -> List[RankedRepository]:
        addresses = domain_services.expand_addresses(config.window.after, config.window.before, config.granularity)
        self.logger.info(
            f"Finestra {config.window.after.isoformat()} -> {config.window.before.isoformat()}: "
            f"{len(addresses)} archivi da elaborare (granularità {config.granularity})."
        )

        aggregate = RepositoryAggregate()
        total_parsed, total_accepted = 0, 0

        for address in addresses:
            parsed, accepted = self.process_address(address, config, aggregate)
            total_parsed += parsed
            total_accepted += accepted

        self.logger.info(
            f"Totale: Parsed={total_parsed}, Accepted={total_accepted}, Repository={len(aggregate)}"
        )
        return domain_services.rank_repositories(aggregate, config.count)

    def process_address(self, address: ArchiveAddress, config: "RunConfig", aggregate: RepositoryAggregate) -> Tuple[int, int]:
        self.logger.info(f"Download archivio: {address.url(config.base_url)}")
        num_parsed, num_accepted = 0, 0

        stream = self.fetcher.fetch(address)
        for record in self.record_stream.parse(self.fetcher.decompress(stream)):
            num_parsed += 1
            try:
                event = domain_services.accumulate(record, config, aggregate)
            except InvalidTimestampError as error:
                raise ParseError(f"Record {num_parsed} di {address.stamp}: {error}") from error
            if event is not None:
                num_accepted += 1

        self.logger.info(f"Ora {address.stamp} completata: parsed={num_parsed}, accepted={num_accepted}")
        return num_parsed, num_accepted
