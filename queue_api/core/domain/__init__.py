"""Modelos de dominio: muestras, rangos de tiempo y claves de bucket."""

from .bucket import BucketKey, DayBucket, Granularity, HourBucket, bucket_key_for
from .queue_level import QueueLevel, queue_level
from .sample import QueueReading, Sample, millis_to_datetime
from .time_range import TimeRange

__all__ = [
    "BucketKey",
    "DayBucket",
    "Granularity",
    "HourBucket",
    "bucket_key_for",
    "QueueLevel",
    "queue_level",
    "QueueReading",
    "Sample",
    "millis_to_datetime",
    "TimeRange",
]
