"""
Retry policy for unary remote calls

Pure exponential backoff without jitter: the delay after the n-th failed
attempt is base_delay * multiplier ** (n - 1).
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List

from .errors import RemoteCallError

logger = logging.getLogger(__name__)


@dataclass
class RetryPolicy:
    """Bounded retry with exponential backoff"""
    max_attempts: int = 5
    base_delay: float = 0.1  # seconds
    multiplier: float = 2.0
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False, compare=False)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0:
            raise ValueError("base_delay must not be negative")

    @classmethod
    def from_config(cls, config) -> 'RetryPolicy':
        return cls(**config.get_retry_params())

    def delay_for(self, attempt: int) -> float:
        """Delay in seconds to wait after the given failed attempt (1-based)"""
        return self.base_delay * (self.multiplier ** (attempt - 1))

    def delays(self) -> List[float]:
        return [self.delay_for(attempt) for attempt in range(1, self.max_attempts)]

    def run(self, func: Callable[[], Any], description: str = "call") -> Any:
        """Call func until it succeeds or max_attempts is reached.

        Any exception raised by func counts as a failed attempt. After the
        final attempt a RemoteCallError carrying the attempt count is raised
        with the last failure chained as its cause.
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                return func()
            except Exception as e:
                if attempt == self.max_attempts:
                    logger.error(f"{description} failed after {attempt} attempts: {e}")
                    raise RemoteCallError(
                        f"{description} failed after {attempt} attempts: {e}",
                        attempts=attempt
                    ) from e

                delay = self.delay_for(attempt)
                logger.warning(f"Retry {attempt}/{self.max_attempts} for {description} after {delay:.3f}s: {e}")
                self.sleep(delay)
