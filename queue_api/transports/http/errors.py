"""Errores del colaborador HTTP (fetch + decodificación)."""

from __future__ import annotations


class QueueFetchError(Exception):
    """Fallo al obtener datos del upstream (transporte o status HTTP)."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class PayloadDecodeError(QueueFetchError):
    """El upstream respondió, pero el JSON no tiene la forma esperada."""
