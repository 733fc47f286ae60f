"""AIS encapsulation sentences (VDM, VDO).

VDM carries AIS messages received from other stations, VDO the own vessel's
messages. Both use '!' as begin char and six fields:

    !AIVDM,1,1,,A,403OviQuMGCqWrRO9>E6fE700@GO,0*4D
           | | | | |                           |
           | | | | |                           +-- 5: fill bits
           | | | | +-- 4: payload
           | | | +-- 3: radio channel
           | | +-- 2: sequential message id
           | +-- 1: fragment index
           +-- 0: fragment count

Once all fragments of a message are joined, ``decode_header`` reads the
message type, repeat indicator and MMSI from the six-bit payload.
"""

from dataclasses import dataclass

from marine.nmea.constants import ALTERNATIVE_BEGIN_CHAR
from marine.nmea.errors import PayloadError
from marine.nmea.fragments import Fragment, is_continuation
from marine.nmea.sentence import Sentence
from marine.nmea.sixbit import Sixbit

_FRAGMENT_COUNT = 0
_FRAGMENT_INDEX = 1
_MESSAGE_ID = 2
_RADIO_CHANNEL = 3
_PAYLOAD = 4
_FILL_BITS = 5

_FIELD_COUNT = 6

# Bit ranges of the header shared by every AIS message type.
_MESSAGE_TYPE_BITS = (0, 6)
_REPEAT_INDICATOR_BITS = (6, 8)
_MMSI_BITS = (8, 38)


class AISSentence(Sentence):
    """Typed view over an AIS encapsulation sentence.

    Subclasses pick the sentence id; ``from_text`` and ``from_talker`` are
    the two constructors the sentence registry requires.
    """

    SENTENCE_ID = "VDM"

    @classmethod
    def from_text(cls, raw: str) -> "AISSentence":
        return cls.parse_expecting(raw, cls.SENTENCE_ID)

    @classmethod
    def from_talker(cls, talker_id: str) -> "AISSentence":
        return cls.new_empty(
            talker_id, cls.SENTENCE_ID, _FIELD_COUNT, ALTERNATIVE_BEGIN_CHAR
        )

    def _optional_string(self, index: int) -> str:
        if self.has_value(index):
            return self.get_string(index)
        return ""

    @property
    def fragment_count(self) -> int:
        return self.get_int(_FRAGMENT_COUNT)

    @property
    def fragment_index(self) -> int:
        return self.get_int(_FRAGMENT_INDEX)

    @property
    def message_id(self) -> str:
        """Sequential message id, or "" when the field is empty."""
        return self._optional_string(_MESSAGE_ID)

    @property
    def channel(self) -> str:
        """Radio channel tag, or "" when the field is empty."""
        return self._optional_string(_RADIO_CHANNEL)

    @property
    def payload(self) -> str:
        return self.get_string(_PAYLOAD)

    @property
    def fill_bits(self) -> int:
        return self.get_int(_FILL_BITS)

    @property
    def is_fragmented(self) -> bool:
        return self.fragment_count > 1

    @property
    def is_first_fragment(self) -> bool:
        return self.fragment_index == 1

    @property
    def is_last_fragment(self) -> bool:
        return self.fragment_index == self.fragment_count

    def to_fragment(self) -> Fragment:
        """Snapshot the fragment fields as an immutable ``Fragment``."""
        fill_bits = self.fill_bits if self.has_value(_FILL_BITS) else 0
        return Fragment(
            fragment_count=self.fragment_count,
            fragment_index=self.fragment_index,
            message_id=self.message_id,
            channel=self.channel,
            payload=self.payload,
            fill_bits=fill_bits,
        )

    def is_part_of_message(self, other: "AISSentence") -> bool:
        """Tell whether ``other`` continues the message this sentence is part of."""
        return is_continuation(self.to_fragment(), other.to_fragment())


class VDMSentence(AISSentence):
    """AIS VHF data-link message, received from other stations."""

    SENTENCE_ID = "VDM"


class VDOSentence(AISSentence):
    """AIS VHF data-link own-vessel report."""

    SENTENCE_ID = "VDO"


@dataclass(frozen=True)
class AISHeader:
    """Fields common to every AIS message.

    Attributes:
        message_type: Message type, 1..27.
        repeat_indicator: Number of times the message has been repeated, 0..3.
        mmsi: Maritime Mobile Service Identity of the sender.
    """

    message_type: int
    repeat_indicator: int
    mmsi: int


def decode_header(payload: str, fill_bits: int = 0) -> AISHeader:
    """Decode the common header of a complete AIS payload.

    Args:
        payload: Armored payload, joined from all fragments.
        fill_bits: Fill bits of the last fragment.

    Raises:
        PayloadError: If the payload is not six-bit armored text or is too
            short to hold the header.

    Example:
        >>> decode_header("403OviQuMGCqWrRO9>E6fE700@GO")
        AISHeader(message_type=4, repeat_indicator=0, mmsi=3669702)
    """
    bits = Sixbit(payload, fill_bits)
    if len(bits) < _MMSI_BITS[1]:
        raise PayloadError(f"Message of {len(bits)} bits has no complete header")
    return AISHeader(
        message_type=bits.get_uint(*_MESSAGE_TYPE_BITS),
        repeat_indicator=bits.get_uint(*_REPEAT_INDICATOR_BITS),
        mmsi=bits.get_uint(*_MMSI_BITS),
    )
