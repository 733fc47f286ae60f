"""Generic NMEA 0183 sentence record.

A ``Sentence`` holds the four parts of a sentence: begin char, talker id,
sentence id and an ordered list of field strings. It can be parsed from raw
text or allocated blank, edited in place by field index, and serialized back
to text with a freshly computed checksum.

Sentence Format:
    $GPGLL,6011.552,N,02501.941,E,120045,A*26
    ||  |  |        | |         | |      |
    ||  |  +--------+-+---------+-+------+-- fields 0..5
    ||  +-- sentence id (GLL)
    |+-- talker id (GP)
    +-- begin char

Proprietary sentences use the single letter 'P' as talker id, followed by a
sentence id of arbitrary length (``$PUBX`` -> "UBX", ``$PRWIILOG`` ->
"RWIILOG").

Field indices exclude the address field: index 0 is the first data field.
An empty string means "data not available".
"""

import re
from collections.abc import Iterable

from marine.nmea import fields
from marine.nmea.checksum import index_of_delimiter, xor
from marine.nmea.constants import (
    AIS_SENTENCE_IDS,
    BEGIN_CHAR,
    BEGIN_CHARS,
    CHECKSUM_DELIMITER,
    FIELD_DELIMITER,
    PROPRIETARY_TALKER_ID,
)
from marine.nmea.errors import (
    FieldIndexError,
    FieldParseError,
    MalformedSentenceError,
    SentenceIdMismatchError,
    SentenceLengthError,
)
from marine.nmea.validator import is_sentence, is_valid, strip_terminator

_TALKER_ID = re.compile(r"P|[A-Z0-9]{2}")
_SENTENCE_ID = re.compile(r"[A-Z0-9]+")


def _is_proprietary(sentence: str) -> bool:
    return sentence[1:2] == PROPRIETARY_TALKER_ID


def parse_talker_id(sentence: str) -> str:
    """Extract the talker id from sentence text.

    Example:
        >>> parse_talker_id("$GPGLL,,,,,,")
        'GP'
        >>> parse_talker_id("$PRWIILOG,GGA,A,T,1,0")
        'P'

    Raises:
        MalformedSentenceError: If the text is not shaped like a sentence.
    """
    if not is_sentence(sentence):
        raise MalformedSentenceError(f"String is not a sentence [{sentence!r}]")
    if _is_proprietary(sentence):
        return PROPRIETARY_TALKER_ID
    return sentence[1:3]


def parse_sentence_id(sentence: str) -> str:
    """Extract the sentence id from sentence text.

    For standard sentences this is everything between the two-letter talker
    id and the first comma; for proprietary sentences everything between
    the 'P' and the first comma.

    Example:
        >>> parse_sentence_id("$GPGGA,1,2,3")
        'GGA'
        >>> parse_sentence_id("$PUBX,00,1,2")
        'UBX'

    Raises:
        MalformedSentenceError: If the text is not shaped like a sentence.
    """
    if not is_sentence(sentence):
        raise MalformedSentenceError(f"String is not a sentence [{sentence!r}]")
    start = 2 if _is_proprietary(sentence) else 3
    return sentence[start : sentence.index(FIELD_DELIMITER)]


class Sentence:
    """A mutable, field-indexed NMEA sentence.

    Use ``Sentence.parse`` to decode raw text and ``Sentence.new_empty`` to
    build a sentence for encoding. Two sentences are equal when they
    serialize to the same text.

    Instances are not thread-safe; share them across threads only as
    read-only values or under a caller-held lock.

    Example:
        >>> s = Sentence.new_empty("GP", "GLL", 5)
        >>> s.set_float(0, 60.5, 4, 3)
        >>> s.to_text()[:-3]
        '$GPGLL,0060.500,,,,'
    """

    def __init__(
        self,
        begin_char: str,
        talker_id: str,
        sentence_id: str,
        values: Iterable[str],
    ) -> None:
        if not _TALKER_ID.fullmatch(talker_id or ""):
            raise ValueError(f"Invalid talker id [{talker_id}]")
        if not _SENTENCE_ID.fullmatch(sentence_id or ""):
            raise ValueError(f"Invalid sentence id [{sentence_id}]")

        self.begin_char = begin_char
        self.talker_id = talker_id
        self._sentence_id = sentence_id
        self._fields = [value or "" for value in values]

    # --- construction ---------------------------------------------------------

    @classmethod
    def parse(cls, raw: str) -> "Sentence":
        """Decode raw sentence text.

        A trailing line terminator is accepted and discarded.

        Raises:
            MalformedSentenceError: If ``raw`` is not a valid sentence.
        """
        if not is_valid(raw):
            raise MalformedSentenceError(f"Invalid data [{raw!r}]")

        raw = strip_terminator(raw)
        begin = raw.index(FIELD_DELIMITER) + 1
        end = index_of_delimiter(raw)
        values = raw[begin:end].split(FIELD_DELIMITER)
        return cls(raw[0], parse_talker_id(raw), parse_sentence_id(raw), values)

    @classmethod
    def parse_expecting(cls, raw: str, expected_id: str) -> "Sentence":
        """Decode raw text and check that it carries ``expected_id``.

        Raises:
            MalformedSentenceError: If ``raw`` is not a valid sentence.
            SentenceIdMismatchError: If the sentence id differs.
        """
        if not expected_id:
            raise ValueError("Sentence type must be specified.")
        sentence = cls.parse(raw)
        if sentence.sentence_id != expected_id:
            raise SentenceIdMismatchError(expected_id, sentence.sentence_id)
        return sentence

    @classmethod
    def new_empty(
        cls,
        talker_id: str,
        sentence_id: str,
        field_count: int,
        begin_char: str = BEGIN_CHAR,
    ) -> "Sentence":
        """Allocate a sentence with ``field_count`` empty fields."""
        if field_count < 0:
            raise ValueError("Size cannot be negative.")
        return cls(begin_char, talker_id, sentence_id, [""] * field_count)

    # --- address --------------------------------------------------------------

    @property
    def begin_char(self) -> str:
        return self._begin_char

    @begin_char.setter
    def begin_char(self, value: str) -> None:
        if value not in BEGIN_CHARS:
            raise ValueError("Invalid begin char; expected '$' or '!'")
        self._begin_char = value

    @property
    def sentence_id(self) -> str:
        return self._sentence_id

    @property
    def field_count(self) -> int:
        return len(self._fields)

    @property
    def is_proprietary(self) -> bool:
        return self.talker_id == PROPRIETARY_TALKER_ID

    @property
    def is_ais(self) -> bool:
        return self._sentence_id in AIS_SENTENCE_IDS

    # --- serialization --------------------------------------------------------

    def to_text(self) -> str:
        """Serialize the sentence with a freshly computed checksum.

        Trailing empty fields are kept; the result is not validated (see
        ``to_sentence``).
        """
        body = self.talker_id + self._sentence_id
        body += "".join(FIELD_DELIMITER + value for value in self._fields)
        return f"{self._begin_char}{body}{CHECKSUM_DELIMITER}{xor(body)}"

    def to_sentence(self, max_length: int | None = None) -> str:
        """Serialize the sentence and check the result.

        Args:
            max_length: Optional maximum length of the text, e.g.
                ``constants.MAX_LENGTH``.

        Raises:
            MalformedSentenceError: If the text does not validate, e.g. a
                field contains a control character or a delimiter.
            SentenceLengthError: If the text is longer than ``max_length``.
        """
        text = self.to_text()
        if not is_valid(text):
            raise MalformedSentenceError(f"Validation failed [{text!r}]")
        if max_length is not None and len(text) > max_length:
            raise SentenceLengthError(f"Sentence max length exceeded {max_length}")
        return text

    def is_valid(self) -> bool:
        return is_valid(self.to_text())

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_text()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sentence):
            return NotImplemented
        return self.to_text() == other.to_text()

    def __hash__(self) -> int:
        return hash(self.to_text())

    # --- field buffer ---------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._fields):
            raise FieldIndexError(
                f"Field index {index} out of range [0..{len(self._fields) - 1}]"
            )

    def resize(self, size: int) -> None:
        """Truncate or pad the field list to ``size`` fields."""
        if size < 1:
            raise ValueError("Number of fields must be greater than zero.")
        del self._fields[size:]
        self._fields.extend([""] * (size - len(self._fields)))

    def reset(self) -> None:
        """Blank every field, keeping the field count."""
        self._fields = [""] * len(self._fields)

    def has_value(self, index: int) -> bool:
        """Tell whether ``index`` exists and holds data."""
        return 0 <= index < len(self._fields) and self._fields[index] != ""

    def get_strings(self, first: int = 0) -> list[str]:
        """Return the raw field values from ``first`` to the end."""
        if first != len(self._fields):
            self._check_index(first)
        return self._fields[first:]

    def set_strings(self, first: int, values: Iterable[str]) -> None:
        """Replace every field from ``first`` on with ``values``.

        The field count becomes ``first + len(values)``.
        """
        if first != len(self._fields):
            self._check_index(first)
        self._fields[first:] = [value or "" for value in values]

    # --- typed accessors ------------------------------------------------------

    def get_string(self, index: int) -> str:
        self._check_index(index)
        return fields.decode_string(self._fields[index])

    def get_char(self, index: int) -> str:
        self._check_index(index)
        return fields.decode_char(self._fields[index])

    def get_int(self, index: int) -> int:
        self._check_index(index)
        return fields.decode_int(self._fields[index])

    def get_float(self, index: int) -> float:
        self._check_index(index)
        return fields.decode_float(self._fields[index])

    def set_string(self, index: int, value: str | None) -> None:
        self._check_index(index)
        self._fields[index] = value or ""

    def set_char(self, index: int, value: str) -> None:
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got [{value}]")
        self.set_string(index, value)

    def set_int(self, index: int, value: int, leading: int = 0) -> None:
        self.set_string(index, fields.encode_int(value, leading))

    def set_float(
        self,
        index: int,
        value: float,
        leading: int | None = None,
        decimals: int | None = None,
    ) -> None:
        """Write a float.

        Without ``leading``/``decimals`` the shortest round-tripping text is
        written; with them, a fixed-width zero-padded rendering.
        """
        if leading is None and decimals is None:
            self.set_string(index, repr(float(value)))
            return
        self.set_string(index, fields.encode_float(value, leading or 0, decimals or 0))

    def set_degrees(self, index: int, value: float) -> None:
        """Write an angle in 0..360 as DDD.D."""
        self.set_string(index, fields.encode_degrees(value))

    # --- position -------------------------------------------------------------

    def get_degrees(self, index: int) -> float:
        """Read a DDDMM.MMMM coordinate as unsigned decimal degrees."""
        self._check_index(index)
        return fields.parse_degrees(self._fields[index])

    def _get_coordinate(
        self, index: int, hemisphere_index: int, hemispheres: str
    ) -> float:
        hemisphere = self.get_char(hemisphere_index)
        if hemisphere not in hemispheres:
            raise FieldParseError(f"Invalid hemisphere '{hemisphere}'")
        return self.get_degrees(index) * fields.hemisphere_sign(hemisphere)

    def get_latitude(self, index: int, hemisphere_index: int) -> float:
        """Read a latitude and its N/S field as signed decimal degrees."""
        return self._get_coordinate(index, hemisphere_index, "NS")

    def get_longitude(self, index: int, hemisphere_index: int) -> float:
        """Read a longitude and its E/W field as signed decimal degrees."""
        return self._get_coordinate(index, hemisphere_index, "EW")

    def set_latitude(self, index: int, hemisphere_index: int, value: float) -> None:
        """Write a signed latitude as DDMM.MMM plus an N/S indicator."""
        if not -90 <= value <= 90:
            raise ValueError("Latitude out of bounds [-90..90]")
        self.set_string(index, fields.format_latitude(value))
        self.set_char(hemisphere_index, "S" if value < 0 else "N")

    def set_longitude(self, index: int, hemisphere_index: int, value: float) -> None:
        """Write a signed longitude as DDDMM.MMM plus an E/W indicator."""
        if not -180 <= value <= 180:
            raise ValueError("Longitude out of bounds [-180..180]")
        self.set_string(index, fields.format_longitude(value))
        self.set_char(hemisphere_index, "W" if value < 0 else "E")
