"""Six-bit ASCII armoring of AIS payloads.

The payload field of a VDM/VDO sentence carries a bit string, six bits per
character. Each character is mapped back to its six-bit value by
subtracting 48, and another 8 when the result is above 40:

    '0'..'W'  (0x30..0x57)  ->  0..39
    '`'..'w'  (0x60..0x77)  -> 40..63

The last character may be padded with fill bits, which are not part of the
message. Bit positions are counted from 0 at the most significant bit of the
first character; ranges are half-open, ``[start, end)``.
"""

import re

from marine.nmea.errors import PayloadError

BITS_PER_CHAR = 6

_ARMORED = re.compile(r"[0-W`-w]*")


def _to_bits(character: str) -> int:
    value = ord(character) - 48
    if value > 40:
        value -= 8
    return value


def _to_text(value: int) -> str:
    # six-bit ASCII: 0..31 are '@'..'_', 32..63 are ' '..'?'
    return chr(value + 64) if value < 32 else chr(value)


class Sixbit:
    """Bit vector over a de-armored AIS payload.

    Args:
        payload: Armored payload text, e.g. a joined VDM payload.
        fill_bits: Number of padding bits at the end, 0..5.

    Raises:
        PayloadError: If the payload is empty, holds characters outside the
            armoring alphabet, or ``fill_bits`` is out of range.

    Example:
        >>> bits = Sixbit("403OviQuMGCqWrRO9>E6fE700@GO", 0)
        >>> bits.get_uint(0, 6)
        4
        >>> bits.get_uint(8, 38)
        3669702
    """

    def __init__(self, payload: str, fill_bits: int = 0) -> None:
        if not payload:
            raise PayloadError("Message payload cannot be empty")
        if not _ARMORED.fullmatch(payload):
            raise PayloadError(f"Invalid payload characters [{payload}]")
        if not 0 <= fill_bits < BITS_PER_CHAR:
            raise PayloadError(f"Fill bits out of range [0..5]: {fill_bits}")

        self.payload = payload
        self.fill_bits = fill_bits
        self._width = len(payload) * BITS_PER_CHAR
        self._bits = 0
        for character in payload:
            self._bits = (self._bits << BITS_PER_CHAR) | _to_bits(character)

    def __len__(self) -> int:
        """Number of message bits, excluding fill bits."""
        return self._width - self.fill_bits

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start < end <= len(self):
            raise PayloadError(
                f"Bit range [{start}, {end}) outside message of {len(self)} bits"
            )

    def get_uint(self, start: int, end: int) -> int:
        """Read bits ``[start, end)`` as an unsigned integer, MSB first."""
        self._check_range(start, end)
        mask = (1 << (end - start)) - 1
        return (self._bits >> (self._width - end)) & mask

    def get_int(self, start: int, end: int) -> int:
        """Read bits ``[start, end)`` as a two's complement signed integer."""
        value = self.get_uint(start, end)
        if value >> (end - start - 1):
            value -= 1 << (end - start)
        return value

    def get_bool(self, index: int) -> bool:
        return self.get_uint(index, index + 1) == 1

    def get_string(self, start: int, end: int) -> str:
        """Read six-bit text from ``[start, end)``; trailing '@' padding is dropped."""
        self._check_range(start, end)
        characters = [
            _to_text(self.get_uint(position, position + BITS_PER_CHAR))
            for position in range(start, end - BITS_PER_CHAR + 1, BITS_PER_CHAR)
        ]
        return "".join(characters).rstrip("@")
