"""JSON formatting utilities for decoded sentences."""

import json
from typing import Any

from marine.nmea import AISHeader, Sentence
from marine.nmea.constants import KNOWN_TALKER_IDS

__all__ = [
    "format_error_message",
    "format_payload_message",
    "format_sentence_message",
    "sentence_to_dict",
]


def sentence_to_dict(sentence: Sentence) -> dict[str, Any]:
    """Describe a decoded sentence as a JSON-compatible dict."""
    return {
        "type": "sentence",
        "begin_char": sentence.begin_char,
        "talker_id": sentence.talker_id,
        "talker_name": KNOWN_TALKER_IDS.get(sentence.talker_id),
        "sentence_id": sentence.sentence_id,
        "proprietary": sentence.is_proprietary,
        "fields": sentence.get_strings(),
        "sentence": sentence.to_text(),
    }


def format_sentence_message(sentence: Sentence) -> str:
    """Serialize a decoded sentence into a JSON string for WebSocket transmission."""
    return json.dumps(sentence_to_dict(sentence))


def format_payload_message(payload: str, fill_bits: int, header: AISHeader) -> str:
    """Serialize a reassembled AIS payload and its decoded header."""
    return json.dumps({
        "type": "ais_payload",
        "payload": payload,
        "fill_bits": fill_bits,
        "message_type": header.message_type,
        "repeat_indicator": header.repeat_indicator,
        "mmsi": header.mmsi,
    })


def format_error_message(raw: str, error: Exception) -> str:
    """Serialize a rejected line and the reason it was rejected."""
    return json.dumps({
        "type": "error",
        "error": type(error).__name__,
        "detail": str(error),
        "raw": raw,
    })
