"""FastAPI web server exposing the NMEA sentence engine.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

REST endpoints decode, encode and checksum single sentences. WebSocket
clients connect to ``ws://<host>:8000/ws``, send raw NMEA lines (one or
more per message) and receive one JSON message per line: ``type="sentence"``
for a decoded line, ``type="error"`` for a rejected one, plus
``type="ais_payload"`` whenever the last fragment of an AIS message arrives.
"""

import asyncio
import logging
from typing import Any

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, Field

from marine.nmea import (
    AISSentence,
    FragmentQueue,
    NMEAError,
    PayloadError,
    Sentence,
    SentenceRegistry,
    UnsupportedSentenceError,
    append_checksum,
    calculate_checksum,
    decode_header,
    is_valid,
)
from server.formatters import (
    format_error_message,
    format_payload_message,
    format_sentence_message,
    sentence_to_dict,
)

LOGGER = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 30.0
_registry = SentenceRegistry()

app = FastAPI()


class RawSentence(BaseModel):
    raw: str


class EncodeRequest(BaseModel):
    talker_id: str
    sentence_id: str
    fields: list[str] = Field(default_factory=list)
    begin_char: str = "$"


@app.post("/sentences/decode")
def decode_sentence(request: RawSentence) -> dict[str, Any]:
    """Decode one sentence with the registered decoder for its type."""
    try:
        sentence = _registry.create_from_text(request.raw)
    except UnsupportedSentenceError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except NMEAError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return sentence_to_dict(sentence)


@app.post("/sentences/encode")
def encode_sentence(request: EncodeRequest) -> dict[str, str]:
    """Build a sentence from its parts and return the text with checksum."""
    try:
        sentence = Sentence(
            request.begin_char, request.talker_id, request.sentence_id, request.fields
        )
        return {"sentence": sentence.to_sentence()}
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/sentences/types")
def list_sentence_types() -> list[str]:
    """List the sentence ids the registry can decode."""
    return _registry.sentence_ids()


@app.post("/checksum")
def checksum(request: RawSentence) -> dict[str, Any]:
    """Calculate the checksum of a line and report whether it validates."""
    return {
        "checksum": calculate_checksum(request.raw),
        "sentence": append_checksum(request.raw),
        "valid": is_valid(request.raw),
    }


def _format_payload(line: str, payload: str, fill_bits: int) -> str:
    try:
        header = decode_header(payload, fill_bits)
    except PayloadError as exc:
        LOGGER.debug("Undecodable AIS payload %r: %s", payload, exc)
        return format_error_message(line, exc)
    return format_payload_message(payload, fill_bits, header)


def _decode_line(line: str, fragments: FragmentQueue) -> list[str]:
    try:
        sentence = _registry.create_from_text(line)
        messages = [format_sentence_message(sentence)]
        if isinstance(sentence, AISSentence):
            joined = fragments.add(sentence.to_fragment())
            if joined is not None:
                messages.append(_format_payload(line, *joined))
    except NMEAError as exc:
        LOGGER.debug("Rejected line %r: %s", line, exc)
        return [format_error_message(line, exc)]
    return messages


async def _decode_messages_until_disconnect(websocket: WebSocket) -> None:
    fragments = FragmentQueue()
    try:
        while True:
            text = await asyncio.wait_for(
                websocket.receive_text(), timeout=_TIMEOUT_SECONDS
            )
            for line in text.splitlines():
                if not line.strip():
                    continue
                for message in _decode_line(line, fragments):
                    await websocket.send_text(message)
    except TimeoutError:
        LOGGER.info("Closing idle WebSocket connection")
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Decode NMEA lines sent by a WebSocket client.

    Each connection keeps its own AIS fragment queue, so fragments sent by
    different clients are never joined. The connection is closed with code
    1001 if the client sends nothing within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    LOGGER.info("WebSocket client connected")
    await _decode_messages_until_disconnect(websocket)
    LOGGER.info("WebSocket client disconnected")
