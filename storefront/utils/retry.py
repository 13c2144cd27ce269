"""Retry utilities using tenacity."""

from dataclasses import dataclass

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from storefront.services.exceptions import SequenceConflictError


@dataclass
class SequenceRetryConfig:
    """Configuration for sequence claim retries with jittered backoff."""

    max_attempts: int = 5
    multiplier: float = 0.01
    max_wait: float = 0.5


def get_sequence_retrying(config: SequenceRetryConfig | None = None) -> AsyncRetrying:
    """Get configured AsyncRetrying for SequenceConflictError.

    Only compare-and-swap misses are retried; the final conflict is re-raised.

    Usage:
        next_id = await get_sequence_retrying()(claim, name)
    """
    cfg = config or SequenceRetryConfig()
    return AsyncRetrying(
        retry=retry_if_exception_type(SequenceConflictError),
        stop=stop_after_attempt(cfg.max_attempts),
        wait=wait_random_exponential(multiplier=cfg.multiplier, max=cfg.max_wait),
        reraise=True,
    )
