"""Reducción de un bucket a un único valor entero, descartando outliers.

Algoritmo (una sola pasada de filtrado):

1. media y desviación estándar poblacional (sin Bessel) del bucket
2. se descarta todo valor con |v - media| > 2σ
3. si queda algo, media entera truncada del subconjunto; si no, media
   truncada del conjunto completo

La división entera trunca hacia cero (no redondea); la salida tiene que ser
reproducible bit a bit.
"""

from __future__ import annotations

import statistics
from typing import List, Sequence

OUTLIER_SIGMAS = 2.0


def trunc_div(numerator: int, denominator: int) -> int:
    """División entera truncando hacia cero (``//`` redondea hacia -inf)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def truncated_mean(values: Sequence[int]) -> int:
    return trunc_div(sum(values), len(values))


def filter_outliers(values: Sequence[int], sigmas: float = OUTLIER_SIGMAS) -> List[int]:
    """Valores a no más de ``sigmas`` desviaciones de la media."""
    mean = statistics.fmean(values)
    std_dev = statistics.pstdev(values, mu=mean) if len(values) > 1 else 0.0
    limit = sigmas * std_dev
    return [v for v in values if abs(v - mean) <= limit]


def reduce_bucket(values: Sequence[int]) -> int:
    """Colapsa los valores crudos de un bucket (no vacío) a un entero."""
    if not values:
        raise ValueError("reduce_bucket requires at least one value")

    kept = filter_outliers(values)
    if kept:
        return truncated_mean(kept)
    return truncated_mean(values)
