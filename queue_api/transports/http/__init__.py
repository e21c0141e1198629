"""Transporte HTTP hacia el upstream de colas."""

from .client import QueueApiClient
from .errors import PayloadDecodeError, QueueFetchError
from .payloads import HistorySampleIn, ServerStatusIn, decode_history, decode_listing
from .retry import RetryConfig, RetryExecutor

__all__ = [
    "QueueApiClient",
    "PayloadDecodeError",
    "QueueFetchError",
    "HistorySampleIn",
    "ServerStatusIn",
    "decode_history",
    "decode_listing",
    "RetryConfig",
    "RetryExecutor",
]
