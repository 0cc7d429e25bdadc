from __future__ import annotations

"""
Serialisation helpers for sequence anomaly reports.

Handlers that forward anomalies to alerting systems encode them with these
helpers so that every consumer agrees on one JSON shape.
"""

from typing import Any, Dict, Union

import orjson

from ..exceptions import SequenceErrorDecodeError
from .error_record import SequenceIdError, SequenceIdErrorType

JsonLike = Union[str, bytes, Dict[str, Any]]

_REQUIRED_FIELDS = ("error_type", "last_seq_id", "curr_seq_id")


def encode_sequence_error(error: SequenceIdError) -> bytes:
    """Encode an anomaly report as compact JSON bytes."""
    return orjson.dumps(error.to_dict())


def decode_sequence_error(payload: JsonLike) -> SequenceIdError:
    """
    Decode an anomaly report produced by encode_sequence_error.

    Args:
        payload: JSON bytes, JSON text or an already-parsed mapping

    Returns:
        The decoded SequenceIdError

    Raises:
        SequenceErrorDecodeError: If the payload is not a valid report
    """
    data = _ensure_mapping(payload)
    missing = [name for name in _REQUIRED_FIELDS if name not in data]
    if missing:
        raise SequenceErrorDecodeError(f"Sequence error report missing fields: {', '.join(missing)}", payload=data)

    try:
        error_type = SequenceIdErrorType(data["error_type"])
    except ValueError as exc:
        raise SequenceErrorDecodeError(f"Unknown sequence error type {data['error_type']!r}") from exc

    modulus = None
    if data.get("modulus") is not None:
        modulus = _coerce_seq_id(data, "modulus")

    return SequenceIdError(
        error_type=error_type,
        last_seq_id=_coerce_seq_id(data, "last_seq_id"),
        curr_seq_id=_coerce_seq_id(data, "curr_seq_id"),
        modulus=modulus,
    )


def _coerce_seq_id(data: Dict[str, Any], field_name: str) -> int:
    value = data[field_name]
    if isinstance(value, bool) or not isinstance(value, int):
        raise SequenceErrorDecodeError(f"{field_name} must be an integer (got {value!r})")
    return value


def _ensure_mapping(payload: JsonLike) -> Dict[str, Any]:
    match payload:
        case dict():
            return payload
        case bytes() | str():
            raw_payload = payload
        case _:
            raise TypeError(f"Unsupported payload type: {type(payload)!r}")

    try:
        data = orjson.loads(raw_payload)
    except orjson.JSONDecodeError as exc:
        raise SequenceErrorDecodeError("Sequence error report is not valid JSON") from exc

    if not isinstance(data, dict):
        raise SequenceErrorDecodeError("Sequence error report must be a JSON object")
    return data


__all__ = ["decode_sequence_error", "encode_sequence_error"]
