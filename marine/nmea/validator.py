"""Structural validation of NMEA sentences.

A string is considered a sentence if:
    * the first character is '$' or '!'
    * it is followed by an upper-case address field of 3 to 10 characters
      (talker id + sentence id; proprietary ids may be long, e.g. PRWIILOG)
    * then a comma and any number of printable ASCII characters
    * then, optionally, '*' and a two-digit hex checksum
    * and finally at most one line terminator (\\r, \\n, \\r\\n or \\n\\r)

The 82 character length limit of NMEA 0183 is not checked here; see
``Sentence.to_sentence``.
"""

import re

from marine.nmea.checksum import calculate, index_of_delimiter
from marine.nmea.constants import TERMINATOR

_LINE_END = r"(\r|\n|\r\n|\n\r)?"

_WITH_CHECKSUM = re.compile(
    r"[$!][A-Z0-9]{3,10},[\x20-\x7F]*\*[A-F0-9]{2}" + _LINE_END
)
_WITHOUT_CHECKSUM = re.compile(r"[$!][A-Z0-9]{3,10},[\x20-\x7F]*" + _LINE_END)


def strip_terminator(sentence: str) -> str:
    """Remove a trailing line terminator, if any."""
    return sentence.rstrip(TERMINATOR)


def is_sentence(sentence: str | None) -> bool:
    """Tell whether a string has the shape of an NMEA 0183 sentence.

    Only the structure is inspected; the checksum value is not verified.

    Args:
        sentence: Candidate line, optionally ending with a terminator.

    Returns:
        True if the string matches the sentence format, False otherwise.

    Example:
        >>> is_sentence("$GPRMC,142312.000,V,,,,,,,080514,,*20\\r\\n")
        True
        >>> is_sentence("$gpgga,1,2,3")
        False
    """
    if not sentence:
        return False

    if index_of_delimiter(sentence) == len(sentence):
        return _WITHOUT_CHECKSUM.fullmatch(sentence) is not None
    return _WITH_CHECKSUM.fullmatch(sentence) is not None


def is_valid(sentence: str | None) -> bool:
    """Tell whether a string is a valid NMEA 0183 sentence.

    The string must pass ``is_sentence`` and, when it carries a checksum,
    the checksum must equal the calculated one. Sentences without a
    checksum are valid by structure alone.

    Example:
        >>> is_valid("$GPGLL,6011.552,N,02501.941,E,120045,A*26")
        True
        >>> is_valid("$GPGLL,6011.552,N,02501.941,E,120045,A*00")
        False
    """
    if not is_sentence(sentence):
        return False

    sentence = strip_terminator(sentence)
    index = index_of_delimiter(sentence)
    if index == len(sentence):
        return True

    return sentence[index + 1 :] == calculate(sentence)
