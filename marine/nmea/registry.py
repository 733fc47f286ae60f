"""Sentence type registry and factory.

The registry maps a sentence id ("GGA", "VDM", "UBX", ...) to a decoder
descriptor. A descriptor is any object exposing two callables:

    from_text(raw: str) -> Sentence
        decode a raw line of that sentence type
    from_talker(talker_id: str) -> Sentence
        allocate a blank sentence of that type for encoding

Classes with two such classmethods (see ``marine.nmea.ais.VDMSentence``) and
``SentenceKind`` instances both qualify. Descriptors are checked when they
are registered.

A new registry is seeded with the built-in table; ``reset_to_defaults``
restores it. Writes replace the whole mapping under a lock, so concurrent
lookups always see either the old or the new table, never a partial one.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any

from marine.nmea.ais import VDMSentence, VDOSentence
from marine.nmea.constants import BEGIN_CHAR
from marine.nmea.errors import RegistrationError, UnsupportedSentenceError
from marine.nmea.sentence import Sentence, parse_sentence_id

__all__ = ["DEFAULT_FIELD_COUNTS", "SentenceKind", "SentenceRegistry"]

LOGGER = logging.getLogger(__name__)

# Blank field count of each built-in sentence type.
DEFAULT_FIELD_COUNTS: dict[str, int] = {
    "ALK": 2,  # Raymarine SeaTalk datagram
    "APB": 14,  # Autopilot sentence B
    "BOD": 6,  # Bearing origin to destination
    "CUR": 11,  # Water current layer
    "DBT": 6,  # Depth below transducer
    "DPT": 3,  # Depth of water
    "DTA": 8,  # Boreal GasFinder data stream A
    "DTB": 8,  # Boreal GasFinder data stream B
    "DTM": 8,  # Datum reference
    "GBS": 8,  # GNSS satellite fault detection
    "GGA": 14,  # GPS fix data
    "GLL": 7,  # Geographic position
    "GNS": 12,  # GNSS fix data
    "GSA": 17,  # DOP and active satellites
    "GST": 8,  # Pseudorange noise statistics
    "GSV": 19,  # Satellites in view
    "HDG": 5,  # Heading, deviation and variation
    "HDM": 2,  # Heading, magnetic
    "HDT": 2,  # Heading, true
    "HTC": 13,  # Heading/track control command
    "HTD": 17,  # Heading/track control data
    "MDA": 20,  # Meteorological composite
    "MHU": 4,  # Humidity
    "MMB": 4,  # Barometric pressure
    "MTA": 2,  # Air temperature
    "MTW": 2,  # Water temperature
    "MWD": 8,  # Wind direction and speed
    "MWV": 5,  # Wind speed and angle
    "OSD": 9,  # Own ship data
    "RMB": 13,  # Recommended minimum navigation information
    "RMC": 12,  # Recommended minimum specific GNSS data
    "ROT": 2,  # Rate of turn
    "RPM": 5,  # Revolutions
    "RSA": 4,  # Rudder sensor angle
    "RSD": 13,  # Radar system data
    "RTE": 4,  # Routes
    "TLB": 1,  # Target label; at least one field keeps the comma after the address
    "TLL": 9,  # Target latitude and longitude
    "TTM": 15,  # Tracked target message
    "TXT": 4,  # Text transmission
    "UBX": 6,  # u-blox proprietary ($PUBX)
    "VBW": 10,  # Dual ground/water speed
    "VDR": 6,  # Set and drift
    "VHW": 8,  # Water speed and heading
    "VLW": 4,  # Distance travelled through water
    "VTG": 9,  # Track made good and ground speed
    "VWR": 9,  # Relative wind speed and angle
    "VWT": 9,  # True wind speed and angle
    "WPL": 5,  # Waypoint location
    "XDR": 4,  # Transducer measurements
    "XTE": 6,  # Cross-track error
    "ZDA": 6,  # Time and date
}


@dataclass(frozen=True)
class SentenceKind:
    """Generic decoder descriptor for a sentence type.

    Decodes into a plain ``Sentence`` after checking the sentence id, and
    allocates ``field_count`` blank fields for encoding.

    Example:
        >>> gga = SentenceKind("GGA", 14)
        >>> gga.from_talker("GP").field_count
        14
    """

    sentence_id: str
    field_count: int
    begin_char: str = BEGIN_CHAR

    def from_text(self, raw: str) -> Sentence:
        return Sentence.parse_expecting(raw, self.sentence_id)

    def from_talker(self, talker_id: str) -> Sentence:
        return Sentence.new_empty(
            talker_id, self.sentence_id, self.field_count, self.begin_char
        )


def _default_table() -> dict[str, Any]:
    table: dict[str, Any] = {
        sentence_id: SentenceKind(sentence_id, field_count)
        for sentence_id, field_count in DEFAULT_FIELD_COUNTS.items()
    }
    table["VDM"] = VDMSentence
    table["VDO"] = VDOSentence
    return table


def _check_descriptor(sentence_id: str, decoder: Any) -> None:
    if not sentence_id:
        raise RegistrationError("Sentence id must be specified")
    for name in ("from_text", "from_talker"):
        if not callable(getattr(decoder, name, None)):
            raise RegistrationError(
                f"Decoder for '{sentence_id}' has no callable {name}(); "
                "required constructors are from_text(raw) and from_talker(talker_id)"
            )


class SentenceRegistry:
    """Thread-safe mapping from sentence id to decoder.

    Example:
        >>> registry = SentenceRegistry()
        >>> registry.create_from_text("$GPGLL,6011.552,N,02501.941,E,120045,A*26").sentence_id
        'GLL'
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._decoders: dict[str, Any] = _default_table()

    def __contains__(self, sentence_id: object) -> bool:
        return sentence_id in self._decoders

    def has_decoder(self, sentence_id: str) -> bool:
        return sentence_id in self._decoders

    def sentence_ids(self) -> list[str]:
        """Return the registered sentence ids, sorted."""
        return sorted(self._decoders)

    def register(self, sentence_id: str, decoder: Any) -> None:
        """Register ``decoder`` for ``sentence_id``, replacing any existing one.

        Raises:
            RegistrationError: If the decoder lacks ``from_text`` or
                ``from_talker``.
        """
        _check_descriptor(sentence_id, decoder)
        with self._lock:
            decoders = dict(self._decoders)
            replaced = decoders.get(sentence_id)
            decoders[sentence_id] = decoder
            self._decoders = decoders
        if replaced is not None:
            LOGGER.debug("Replaced decoder for %s: %r -> %r", sentence_id, replaced, decoder)
        else:
            LOGGER.debug("Registered decoder for %s: %r", sentence_id, decoder)

    def unregister(self, decoder: Any) -> None:
        """Remove whichever sentence id is mapped to ``decoder``."""
        with self._lock:
            decoders = dict(self._decoders)
            for sentence_id, registered in self._decoders.items():
                if registered == decoder:
                    del decoders[sentence_id]
                    LOGGER.debug("Unregistered decoder for %s", sentence_id)
                    break
            self._decoders = decoders

    def reset_to_defaults(self) -> None:
        """Discard all registrations and restore the built-in table."""
        with self._lock:
            self._decoders = _default_table()
        LOGGER.debug("Sentence registry reset to %d built-in decoders", len(self._decoders))

    def _lookup(self, sentence_id: str) -> Any:
        try:
            return self._decoders[sentence_id]
        except KeyError as exc:
            raise UnsupportedSentenceError(
                f"Parser for type '{sentence_id}' not found"
            ) from exc

    def create_from_text(self, raw: str) -> Sentence:
        """Decode ``raw`` with the decoder registered for its sentence id.

        Raises:
            MalformedSentenceError: If ``raw`` is not a valid sentence.
            UnsupportedSentenceError: If no decoder is registered.
        """
        return self._lookup(parse_sentence_id(raw)).from_text(raw)

    def create_for_talker(self, talker_id: str, sentence_id: str) -> Sentence:
        """Allocate a blank sentence of ``sentence_id`` for ``talker_id``.

        Raises:
            UnsupportedSentenceError: If no decoder is registered.
        """
        return self._lookup(sentence_id).from_talker(talker_id)
