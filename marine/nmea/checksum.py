"""NMEA checksum calculation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between the begin char ('$' or
'!') and '*' (exclusive), then represented as a two-digit uppercase
hexadecimal number after the '*'.

Example sentence structure:
    $GPGLL,6011.552,N,02501.941,E,120045,A*26
    ^                                    ^^^
    begin                                checksum (0x26)
"""

from marine.nmea.constants import CHECKSUM_DELIMITER


def index_of_delimiter(sentence: str) -> int:
    """Return the position of the checksum delimiter.

    Args:
        sentence: Sentence text, with or without checksum.

    Returns:
        Index of '*', or the string length if there is no delimiter. A '*'
        at position 0 is not a delimiter (there is no sentence before it).

    Example:
        >>> index_of_delimiter("$GPGGA,,,,,,,")
        13
        >>> index_of_delimiter("$GPGGA,,,,,,,*00")
        13
    """
    index = sentence.find(CHECKSUM_DELIMITER)
    if index > 0:
        return index
    return len(sentence)


def xor(content: str) -> str:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content.

    Args:
        content: The characters between the begin char and '*' (exclusive)

    Returns:
        Two-digit uppercase hexadecimal checksum, zero-padded

    Example:
        >>> xor("GPGLL,6011.552,N,02501.941,E,120045,A")
        '26'
    """
    result = 0
    for character in content:
        result ^= ord(character) & 0xFF
    return f"{result:02X}"


def calculate(sentence: str) -> str:
    """Calculate the checksum of a sentence.

    Any checksum already present is ignored.

    Args:
        sentence: Sentence text beginning with the begin char.

    Returns:
        Two-digit uppercase hexadecimal checksum

    Example:
        >>> calculate("$GPGLL,6011.552,N,02501.941,E,120045,A*00")
        '26'
    """
    return xor(sentence[1 : index_of_delimiter(sentence)])


def append(sentence: str) -> str:
    """Append a freshly computed checksum, replacing any existing one.

    Example:
        >>> append("$GPGLL,6011.552,N,02501.941,E,120045,A*")
        '$GPGLL,6011.552,N,02501.941,E,120045,A*26'
    """
    body = sentence[: index_of_delimiter(sentence)]
    return f"{body}{CHECKSUM_DELIMITER}{calculate(body)}"
