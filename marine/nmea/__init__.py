"""NMEA 0183 sentence engine: checksum, validation, field codec and registry."""

from marine.nmea.ais import AISHeader, AISSentence, VDMSentence, VDOSentence, decode_header
from marine.nmea.checksum import append as append_checksum
from marine.nmea.checksum import calculate as calculate_checksum
from marine.nmea.errors import (
    FieldIndexError,
    FieldNotAvailableError,
    FieldParseError,
    MalformedSentenceError,
    NMEAError,
    PayloadError,
    RegistrationError,
    SentenceIdMismatchError,
    SentenceLengthError,
    UnsupportedSentenceError,
)
from marine.nmea.fields import format_latitude, format_longitude, parse_degrees
from marine.nmea.fragments import Fragment, FragmentQueue, is_continuation, join_payload
from marine.nmea.registry import SentenceKind, SentenceRegistry
from marine.nmea.sentence import Sentence, parse_sentence_id, parse_talker_id
from marine.nmea.sixbit import Sixbit
from marine.nmea.validator import is_sentence, is_valid

__all__ = [
    "AISHeader",
    "AISSentence",
    "FieldIndexError",
    "FieldNotAvailableError",
    "FieldParseError",
    "Fragment",
    "FragmentQueue",
    "MalformedSentenceError",
    "NMEAError",
    "PayloadError",
    "RegistrationError",
    "Sentence",
    "SentenceIdMismatchError",
    "SentenceKind",
    "SentenceLengthError",
    "SentenceRegistry",
    "Sixbit",
    "UnsupportedSentenceError",
    "VDMSentence",
    "VDOSentence",
    "append_checksum",
    "calculate_checksum",
    "decode_header",
    "format_latitude",
    "format_longitude",
    "is_continuation",
    "is_sentence",
    "is_valid",
    "join_payload",
    "parse_degrees",
    "parse_sentence_id",
    "parse_talker_id",
]
