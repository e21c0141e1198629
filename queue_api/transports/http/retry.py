"""Retry con backoff exponencial para las llamadas al upstream.

Solo se reintentan errores de transporte (timeouts, conexiones caídas); un
status HTTP de error o un payload inválido no mejora reintentando.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Type, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryConfig:
    """Configuración para retry con backoff."""

    max_attempts: int = 3
    base_delay: float = 0.5  # segundos
    max_delay: float = 5.0  # segundos
    exponential_base: float = 2.0
    jitter: bool = True
    retryable_exceptions: Tuple[Type[Exception], ...] = (httpx.TransportError,)

    def calculate_delay(self, attempt: int) -> float:
        """Delay en segundos antes del intento ``attempt + 1`` (1-indexed)."""
        delay = self.base_delay * (self.exponential_base ** (attempt - 1))
        delay = min(delay, self.max_delay)

        if self.jitter:
            # ±25%
            jitter_range = delay * 0.25
            delay += random.uniform(-jitter_range, jitter_range)

        return max(0, delay)


class RetryExecutor:
    """Ejecuta una operación reintentando según ``RetryConfig``."""

    def __init__(
        self,
        config: Optional[RetryConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._config = config or RetryConfig()
        self._sleep = sleep
        self._total_attempts = 0
        self._total_retries = 0
        self._total_failures = 0

    @property
    def stats(self) -> dict:
        return {
            "total_attempts": self._total_attempts,
            "total_retries": self._total_retries,
            "total_failures": self._total_failures,
        }

    def execute(self, func: Callable[..., T], *args, **kwargs) -> T:
        """Ejecuta ``func``; propaga la última excepción si se agotan los intentos."""
        name = getattr(func, "__name__", repr(func))

        for attempt in range(1, self._config.max_attempts + 1):
            self._total_attempts += 1
            try:
                return func(*args, **kwargs)
            except self._config.retryable_exceptions as e:
                if attempt == self._config.max_attempts:
                    self._total_failures += 1
                    stats = self.stats
                    logger.error(
                        "RETRY_EXHAUSTED func=%s attempts=%d err=%s total_attempts=%d total_retries=%d total_failures=%d",
                        name, attempt, e,
                        stats["total_attempts"], stats["total_retries"], stats["total_failures"],
                    )
                    raise

                self._total_retries += 1
                delay = self._config.calculate_delay(attempt)
                logger.warning(
                    "RETRY func=%s attempt=%d/%d delay=%.2fs err=%s",
                    name, attempt, self._config.max_attempts, delay, e,
                )
                self._sleep(delay)

        raise RuntimeError("Retry loop completed without result")
