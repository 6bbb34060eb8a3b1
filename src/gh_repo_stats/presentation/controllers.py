import logging
from typing import Any, Callable, Dict, Optional

from ..application.errors import ConfigError
from ..application.interfaces import IRepoStatsUseCase
from ..config import RunConfig, build_run_config
from ..domain.interfaces import IResultWriter

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

ServiceFactory = Callable[[RunConfig], IRepoStatsUseCase]

class StatsController:
    """
    Collega le opzioni della CLI alla pipeline di classifica.

    La configurazione viene validata prima di costruire il servizio:
    con parametri non validi nessun archivio viene scaricato.
    """

    def __init__(self, service_factory: ServiceFactory, writer: IResultWriter, logger: logging.LoggerAdapter):
        self.service_factory = service_factory
        self.writer = writer
        self.logger = logger

    def prepare_config(self, options: Dict[str, Any]) -> Optional[RunConfig]:
        try:
            return build_run_config(**options)
        except ConfigError as error:
            print(str(error))
            self.logger.debug(f"Configurazione rifiutata: {options}")
            return None

    def run(self, options: Dict[str, Any]) -> int:
        config = self.prepare_config(options)
        if config is None:
            return EXIT_CONFIG_ERROR

        self.logger.info(
            f"Classifica top {config.count} per '{config.event_name}' "
            f"({config.window.after.isoformat()} -> {config.window.before.isoformat()})"
        )
        service = self.service_factory(config)
        results = service.run(config)
        self.writer.write(results)
        self.logger.info(f"Stampate {len(results)} repository.")
        return EXIT_OK
