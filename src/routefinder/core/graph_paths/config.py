"""
Search configuration.

Module-level defaults plus a validated ``SearchConfig`` carrying the
per-invocation knobs: memory budget, frontier bound, route self-checks and
the cancellation token.
"""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import ConfigurationError
from .types import Algorithm
from .utils import MAX_QUEUE_SIZE, CancellationToken

# Constants
DEFAULT_ALGORITHM = Algorithm.DIJKSTRA
DEFAULT_MEMORY_CHECK_INTERVAL = 0.1  # Seconds between RSS samples


@dataclass(frozen=True)
class SearchConfig:
    """
    Per-search configuration.

    Attributes:
        max_memory_mb: Abort when process RSS grows by more than this many MB
            during the search. None disables the check.
        memory_check_interval: Minimum seconds between RSS samples
        max_queue_size: Abort when a frontier holds more entries than this
        validate_routes: Re-check every returned route against the graph
        cancel_token: Token checked once per frontier extraction
    """

    max_memory_mb: Optional[float] = None
    memory_check_interval: float = DEFAULT_MEMORY_CHECK_INTERVAL
    max_queue_size: int = MAX_QUEUE_SIZE
    validate_routes: bool = False
    cancel_token: Optional[CancellationToken] = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_memory_mb is not None:
            if isinstance(self.max_memory_mb, bool) or not isinstance(
                self.max_memory_mb, (int, float)
            ):
                raise ConfigurationError("max_memory_mb must be a number")
            if self.max_memory_mb <= 0:
                raise ConfigurationError("max_memory_mb must be positive")
        if isinstance(self.memory_check_interval, bool) or not isinstance(
            self.memory_check_interval, (int, float)
        ):
            raise ConfigurationError("memory_check_interval must be a number")
        if self.memory_check_interval < 0:
            raise ConfigurationError("memory_check_interval cannot be negative")
        if not isinstance(self.max_queue_size, int) or isinstance(self.max_queue_size, bool):
            raise ConfigurationError("max_queue_size must be an integer")
        if self.max_queue_size <= 0:
            raise ConfigurationError("max_queue_size must be positive")
        if self.cancel_token is not None and not isinstance(self.cancel_token, CancellationToken):
            raise ConfigurationError("cancel_token must be a CancellationToken")


DEFAULT_CONFIG = SearchConfig()
