"""Tests for the sentence registry."""

import logging
import threading

import pytest

from marine.nmea.ais import VDMSentence, VDOSentence
from marine.nmea.errors import (
    MalformedSentenceError,
    RegistrationError,
    UnsupportedSentenceError,
)
from marine.nmea.registry import DEFAULT_FIELD_COUNTS, SentenceKind, SentenceRegistry
from marine.nmea.sentence import Sentence

GLL = "$GPGLL,6011.552,N,02501.941,E,120045,A*26"
VDM = "!AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0*5C"


class CustomDecoder:
    """Decoder used to replace and extend the built-in table."""

    @classmethod
    def from_text(cls, raw):
        sentence = Sentence.parse(raw)
        sentence.set_string(0, "custom")
        return sentence

    @classmethod
    def from_talker(cls, talker_id):
        return Sentence.new_empty(talker_id, "XYZ", 2)


class TestSentenceKind:
    """Tests for the generic decoder descriptor."""

    def test_from_text(self):
        sentence = SentenceKind("GLL", 7).from_text(GLL)
        assert sentence.to_text() == GLL

    def test_from_talker(self):
        sentence = SentenceKind("GLL", 5).from_talker("GP")
        assert sentence.to_text() == "$GPGLL,,,,,*7C"


class TestDefaults:
    """Tests for the built-in table."""

    def test_builtin_ids(self):
        registry = SentenceRegistry()

        for sentence_id in DEFAULT_FIELD_COUNTS:
            assert registry.has_decoder(sentence_id)
        assert "VDM" in registry
        assert "VDO" in registry
        assert "XYZ" not in registry

    def test_sentence_ids_sorted(self):
        ids = SentenceRegistry().sentence_ids()
        assert ids == sorted(ids)
        assert len(ids) == len(DEFAULT_FIELD_COUNTS) + 2

    def test_create_from_text(self):
        sentence = SentenceRegistry().create_from_text(GLL)

        assert sentence.sentence_id == "GLL"
        assert sentence.get_latitude(0, 1) == pytest.approx(60.19253333)

    def test_create_ais_from_text(self):
        sentence = SentenceRegistry().create_from_text(VDM)

        assert isinstance(sentence, VDMSentence)
        assert sentence.channel == "B"

    @pytest.mark.parametrize("sentence_id", sorted(DEFAULT_FIELD_COUNTS) + ["VDM", "VDO"])
    def test_blank_sentence_round_trip(self, sentence_id):
        registry = SentenceRegistry()
        blank = registry.create_for_talker("GP", sentence_id)

        assert blank.is_valid() is True
        assert registry.create_from_text(blank.to_text()) == blank

    def test_create_for_talker(self):
        registry = SentenceRegistry()

        gga = registry.create_for_talker("GP", "GGA")
        assert gga.field_count == DEFAULT_FIELD_COUNTS["GGA"]
        assert gga.talker_id == "GP"

        vdo = registry.create_for_talker("AI", "VDO")
        assert isinstance(vdo, VDOSentence)
        assert vdo.begin_char == "!"

    def test_unknown_sentence(self):
        registry = SentenceRegistry()

        with pytest.raises(UnsupportedSentenceError, match="'XYZ' not found"):
            registry.create_from_text("$GPXYZ,1,2")
        with pytest.raises(UnsupportedSentenceError):
            registry.create_for_talker("GP", "XYZ")

    def test_malformed_text(self):
        with pytest.raises(MalformedSentenceError):
            SentenceRegistry().create_from_text("foobar")


class TestRegister:
    """Tests for register, unregister and reset_to_defaults."""

    def test_register_new_type(self):
        registry = SentenceRegistry()
        registry.register("XYZ", CustomDecoder)

        assert registry.create_from_text("$GPXYZ,1,2").get_string(0) == "custom"
        assert registry.create_for_talker("II", "XYZ").field_count == 2

    def test_replace_builtin(self):
        registry = SentenceRegistry()
        registry.register("GLL", CustomDecoder)

        assert registry.create_from_text(GLL).get_string(0) == "custom"

    def test_registries_are_independent(self):
        registry = SentenceRegistry()
        registry.register("XYZ", CustomDecoder)

        assert "XYZ" not in SentenceRegistry()

    def test_reset_to_defaults(self):
        registry = SentenceRegistry()
        registry.register("GLL", CustomDecoder)
        registry.register("XYZ", CustomDecoder)
        registry.reset_to_defaults()

        assert "XYZ" not in registry
        assert registry.create_from_text(GLL).get_string(0) == "6011.552"

    def test_unregister(self):
        registry = SentenceRegistry()
        registry.register("XYZ", CustomDecoder)
        registry.unregister(CustomDecoder)

        assert "XYZ" not in registry

    def test_unregister_builtin_kind(self):
        registry = SentenceRegistry()
        registry.unregister(SentenceKind("GLL", DEFAULT_FIELD_COUNTS["GLL"]))

        assert "GLL" not in registry
        assert "GGA" in registry

    def test_unregister_unknown_is_noop(self):
        registry = SentenceRegistry()
        registry.unregister(CustomDecoder)

        assert registry.sentence_ids() == SentenceRegistry().sentence_ids()

    @pytest.mark.parametrize("decoder", [object(), "GLL", Sentence])
    def test_invalid_descriptor(self, decoder):
        registry = SentenceRegistry()

        with pytest.raises(RegistrationError):
            registry.register("XYZ", decoder)
        assert "XYZ" not in registry

    def test_empty_sentence_id(self):
        with pytest.raises(TypeError):
            SentenceRegistry().register("", CustomDecoder)

    def test_logs_registration(self, caplog):
        registry = SentenceRegistry()

        with caplog.at_level(logging.DEBUG, logger="marine.nmea.registry"):
            registry.register("XYZ", CustomDecoder)

        assert "Registered decoder for XYZ" in caplog.text

    def test_concurrent_lookups_during_registration(self):
        registry = SentenceRegistry()
        errors = []

        def lookup():
            try:
                for _ in range(200):
                    registry.create_from_text(GLL)
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=lookup) for _ in range(4)]
        for thread in threads:
            thread.start()
        for index in range(200):
            registry.register(f"X{index:02d}", CustomDecoder)
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(registry.sentence_ids()) == len(DEFAULT_FIELD_COUNTS) + 2 + 200
