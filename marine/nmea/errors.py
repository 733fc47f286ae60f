"""Exceptions raised by the NMEA sentence engine.

Every error derives from ``NMEAError`` and from the builtin exception that
best describes it, so callers may catch either the specific class or the
builtin (e.g. ``except ValueError`` for any malformed content).
"""


class NMEAError(Exception):
    """Base class for all sentence engine errors."""


class MalformedSentenceError(NMEAError, ValueError):
    """Raw text does not pass structural or checksum validation."""


class SentenceIdMismatchError(NMEAError, ValueError):
    """Parsed sentence id differs from the one the caller expected."""

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(
            f"Sentence id mismatch; expected [{expected}], found [{found}]."
        )
        self.expected = expected
        self.found = found


class FieldNotAvailableError(NMEAError, LookupError):
    """The requested field is empty ("data not available")."""


class FieldParseError(NMEAError, ValueError):
    """Field content cannot be converted to the requested type."""


class FieldIndexError(NMEAError, IndexError):
    """Field index is outside the current field count."""


class SentenceLengthError(NMEAError, ValueError):
    """Serialized sentence exceeds the requested maximum length."""


class UnsupportedSentenceError(NMEAError, LookupError):
    """No decoder is registered for the sentence id."""


class RegistrationError(NMEAError, TypeError):
    """A decoder descriptor lacks one of the required constructors."""


class PayloadError(NMEAError, ValueError):
    """AIS payload holds invalid six-bit characters or too few bits."""
