"""Application ports for the external image codec."""

from __future__ import annotations

from typing import Protocol

from imco.formats import ImageFormat
from imco.types import UnsupportedKind


class CodecError(Exception):
    """Base class for failures reported by a codec adapter."""

    def __init__(self, hint: str = "") -> None:
        super().__init__(hint)
        self.hint = hint


class CodecDecodingError(CodecError):
    """Input data is structurally invalid for its format."""


class CodecEncodingError(CodecError):
    """The encoder failed while producing output."""


class CodecParameterError(CodecError):
    """The codec was called with invalid parameters."""


class CodecLimitsError(CodecError):
    """A codec resource limit (dimensions, memory) was exceeded."""


class CodecUnsupportedError(CodecError):
    """The codec understood the request but cannot fulfil it."""

    def __init__(self, kind: UnsupportedKind, subject: str = "") -> None:
        super().__init__(subject)
        self.kind = kind
        self.subject = subject


class CodecIoError(CodecError):
    """Operating-system error surfaced by the codec."""

    def __init__(self, os_error: OSError) -> None:
        super().__init__(str(os_error))
        self.os_error = os_error


class DecodedImage(Protocol):
    """In-memory image produced by :meth:`ImageReader.decode`."""

    def save(self, path: str) -> None:
        """Encode to ``path``, inferring the format from its extension."""

    def save_with_format(self, path: str, image_format: ImageFormat) -> None:
        """Encode to ``path`` in ``image_format``."""


class ImageReader(Protocol):
    """Handle over the raw bytes of one input file."""

    def set_format(self, image_format: ImageFormat) -> None:
        """Force the format used for decoding."""

    def format(self) -> ImageFormat | None:
        """Return the known or detected input format, if any."""

    def decode(self) -> DecodedImage:
        """Decode the image, raising :class:`CodecError` on failure."""


class ImageCodec(Protocol):
    """Open image inputs for decoding."""

    def open(self, path: str) -> ImageReader:
        """Read ``path`` and return a reader; raises ``OSError`` on I/O failure."""
