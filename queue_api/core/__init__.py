"""Core module - dominio del servicio de colas.

Estructura:
- domain/  → Sample, QueueReading, TimeRange, claves de bucket
"""
