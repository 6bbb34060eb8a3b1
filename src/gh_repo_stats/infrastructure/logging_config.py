import logging
from typing import Any, MutableMapping

def configure_logging(level: int = logging.INFO) -> None:
    """
    Configura formato e livello del logging per tutti i layer.

    I log vanno su stderr (default di basicConfig), così stdout contiene
    soltanto le righe della classifica.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)-8s - [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

class LayerLoggerAdapter(logging.LoggerAdapter):
    def process(
        self,
        msg: Any,
        kwargs: MutableMapping[str, Any],
    ) -> tuple[Any, MutableMapping[str, Any]]:
        layer_name = self.extra.get("layer", "Generic") if self.extra else "Generic"
        return f"[{layer_name}] {msg}", kwargs
