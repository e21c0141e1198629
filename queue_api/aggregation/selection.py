"""Búsqueda del punto más cercano para la interacción con el gráfico.

La selección se resuelve por índice o por tiempo de bucket, nunca por la
etiqueta (que no es única).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from .models import ChartPoint


def point_at_fraction(points: Sequence[ChartPoint], fraction: float) -> Optional[ChartPoint]:
    """Punto más cercano a una posición horizontal normalizada (0..1).

    Los puntos se reparten de forma uniforme a lo ancho del gráfico, igual que
    en el eje categórico del dibujo.
    """
    if not points:
        return None
    fraction = min(1.0, max(0.0, fraction))
    index = int(round(fraction * (len(points) - 1)))
    return points[index]


def nearest_point_by_time(points: Sequence[ChartPoint], at: datetime) -> Optional[ChartPoint]:
    """Punto cuyo ``bucket_start`` está más cerca de ``at`` (empate: el anterior)."""
    best: Optional[ChartPoint] = None
    best_distance = None
    for point in points:
        distance = abs((point.bucket_start - at).total_seconds())
        if best_distance is None or distance < best_distance:
            best, best_distance = point, distance
    return best
