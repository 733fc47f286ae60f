"""Marine package for decoding and encoding NMEA 0183 sentences."""

from marine.nmea import (
    Fragment,
    NMEAError,
    Sentence,
    SentenceRegistry,
    is_continuation,
    is_valid,
)

__all__ = [
    "Fragment",
    "NMEAError",
    "Sentence",
    "SentenceRegistry",
    "is_continuation",
    "is_valid",
]
