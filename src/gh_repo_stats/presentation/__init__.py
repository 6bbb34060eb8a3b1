from .controllers import StatsController

__all__ = [
    "StatsController",
]
