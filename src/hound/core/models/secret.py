"""Write-masked JSON payloads."""

import json
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

_MASK = "**********"
_EMPTY_OBJECT = b"{}"


class SecretMessage:
    """A raw JSON payload that never serializes back out.

    Decoding keeps the serialized bytes of whatever JSON value it is
    given. Encoding always produces an empty object, so any model that
    holds a ``SecretMessage`` can be dumped for untrusted consumers
    without a separate redaction pass. The payload is reachable only
    through :meth:`get_secret_value`.
    """

    __slots__ = ("_payload",)

    def __init__(self, payload: bytes = b"") -> None:
        self._payload = bytes(payload)

    def get_secret_value(self) -> bytes:
        """Return the payload bytes.

        Payloads decoded from JSON are a compact re-serialization of the
        parsed value, not the original text: whitespace is dropped,
        numbers are normalized (``1e5`` becomes ``100000.0``) and
        duplicate keys collapse to the last one. Bytes handed in
        directly are kept as given.
        """
        return self._payload

    def encode(self) -> bytes:
        """Encode as JSON. Always the empty object."""
        return _EMPTY_OBJECT

    @classmethod
    def decode(cls, value: Any) -> "SecretMessage":
        """Capture a decoded JSON value as its serialized bytes.

        ``bytes`` are taken as already-serialized JSON and kept verbatim.
        """
        if value is None:
            raise ValueError("SecretMessage: decode called without a value")
        if isinstance(value, cls):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(bytes(value))
        try:
            raw = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"SecretMessage: value is not JSON serializable: {exc}") from exc
        return cls(raw.encode("utf-8"))

    @staticmethod
    def _mask(value: "SecretMessage") -> dict:
        return {}

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.decode,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._mask,
                info_arg=False,
                return_schema=core_schema.dict_schema(),
            ),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretMessage):
            return NotImplemented
        return self._payload == other._payload

    def __hash__(self) -> int:
        return hash(self._payload)

    def __len__(self) -> int:
        return len(self._payload)

    def __repr__(self) -> str:
        return f"SecretMessage('{_MASK if self._payload else ''}')"
