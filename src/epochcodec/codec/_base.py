"""Abstract base class for timestamp codecs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from epochcodec._errors import (
    ERR_MSG_INVALID_BYTE_LENGTH,
    ERR_MSG_UNSUPPORTED_OPERATION,
    InvalidByteLengthError,
    UnsupportedOperationError,
)
from epochcodec._precision import Rounding, check_width, require_int
from epochcodec.epochs import CodecKind, EpochDefinition
from epochcodec.instant import Instant

RawValue = int | float


class Codec(ABC):
    """Interface every codec kind implements.

    A codec is stateless: the :class:`EpochDefinition` passed to each call
    carries the reference instant, scale and range.
    """

    kind: ClassVar[CodecKind]

    @abstractmethod
    def to_canonical(self, definition: EpochDefinition, raw: RawValue) -> Instant: ...

    @abstractmethod
    def from_canonical(
        self,
        definition: EpochDefinition,
        instant: Instant,
        *,
        rounding: Rounding | None = None,
    ) -> RawValue: ...

    def to_bytes(self, definition: EpochDefinition, raw: int) -> bytes:
        """Serialize an integer raw value in the encoding's byte order."""
        byteorder = self.byteorder(definition)
        raw = require_int(raw, epoch=definition.name)
        check_width(raw, definition.bits, definition.signed, epoch=definition.name)
        return raw.to_bytes(
            definition.byte_length, byteorder, signed=definition.signed
        )

    def from_bytes(self, definition: EpochDefinition, data: bytes) -> int:
        byteorder = self.byteorder(definition)
        if len(data) != definition.byte_length:
            raise InvalidByteLengthError(
                ERR_MSG_INVALID_BYTE_LENGTH,
                f"{definition.name}: expected {definition.byte_length} bytes, "
                f"got {len(data)}",
            )
        return int.from_bytes(data, byteorder, signed=definition.signed)

    @staticmethod
    def byteorder(definition: EpochDefinition) -> str:
        if definition.byteorder is None:
            raise UnsupportedOperationError(
                ERR_MSG_UNSUPPORTED_OPERATION,
                f"{definition.name} has no fixed-width byte form",
            )
        return definition.byteorder

    @staticmethod
    def _reject_rounding(definition: EpochDefinition, rounding: Rounding | None) -> None:
        if rounding is not None and rounding != definition.rounding:
            raise UnsupportedOperationError(
                ERR_MSG_UNSUPPORTED_OPERATION,
                f"{definition.name} does not support {rounding} rounding",
            )
