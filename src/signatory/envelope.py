"""Envelope codec — base64 of compact JSON, with default field injection."""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Callable
from datetime import datetime
from typing import Any

from signatory.errors import DecodeError, EmptyInputError, ParseError, SerializationError
from signatory.signing.canonical import SIGN_FIELD
from signatory.values import ParameterSet

__all__ = ["TIMESTAMP_FIELD", "decode_envelope", "encode_envelope", "with_defaults"]

TIMESTAMP_FIELD = "timestamp"


def with_defaults(
    params: ParameterSet,
    *,
    signer: Callable[[ParameterSet], str],
    clock: Callable[[], datetime],
) -> dict[str, Any]:
    """Return a copy of params with ``timestamp`` and ``sign`` filled in.

    The timestamp is injected first so the signature covers it. Values the
    caller already supplied, including ``sign``, are kept verbatim.
    """
    if not params:
        raise EmptyInputError()

    filled = dict(params)
    if TIMESTAMP_FIELD not in filled:
        filled[TIMESTAMP_FIELD] = str(int(clock().timestamp()))
    if SIGN_FIELD not in filled:
        filled[SIGN_FIELD] = signer(filled)
    return filled


def encode_envelope(
    params: ParameterSet,
    *,
    signer: Callable[[ParameterSet], str],
    clock: Callable[[], datetime],
) -> str:
    """Fill defaults, serialise to JSON and base64-encode the UTF-8 bytes.

    Raises:
        EmptyInputError: If ``params`` has no entries.
        SerializationError: If a value cannot be rendered as JSON.
    """
    filled = with_defaults(params, signer=signer, clock=clock)
    try:
        body = json.dumps(filled, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        raw = body.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Failed to serialize params to JSON: {exc}") from exc
    return base64.b64encode(raw).decode("ascii")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode_envelope(envelope: str) -> dict[str, Any]:
    """Recover the parameter set from an envelope. No signature check.

    Raises:
        DecodeError: Invalid base64 (alphabet or padding) or invalid UTF-8.
        ParseError: Malformed JSON, or a top-level value that is not an object.
    """
    try:
        raw = base64.b64decode(envelope, validate=True)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise DecodeError(f"Invalid base64 envelope: {exc}") from exc

    try:
        body = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Envelope payload is not UTF-8: {exc}") from exc

    try:
        result = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ParseError(f"Invalid JSON in envelope: {exc}") from exc

    if not isinstance(result, dict):
        raise ParseError(f"Envelope payload must be a JSON object, got {type(result).__name__}")
    return result
