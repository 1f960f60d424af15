"""Pillow implementation of the image codec port."""

from __future__ import annotations

import io
import logging
import re
import struct
from pathlib import Path, PurePath

from PIL import Image, UnidentifiedImageError

from imco.application.ports import (
    CodecDecodingError,
    CodecEncodingError,
    CodecIoError,
    CodecLimitsError,
    CodecParameterError,
    CodecUnsupportedError,
)
from imco.errors import InvalidFormat
from imco.formats import ImageFormat, from_pillow_format, resolve_from_path

logger = logging.getLogger(__name__)

_UNSUPPORTED_MODE = re.compile(r"cannot write mode (\S+) as")


def _extension_format(path: str) -> ImageFormat | None:
    try:
        return resolve_from_path(path)
    except InvalidFormat:
        return None


class PillowImage:
    """Decoded Pillow image that encodes to files."""

    def __init__(self, image: Image.Image) -> None:
        self._image = image

    def save(self, path: str) -> None:
        """Encode to ``path`` in the format its extension maps to."""
        image_format = _extension_format(path)
        if image_format is None:
            raise CodecUnsupportedError(
                "format", PurePath(path).suffix.lstrip(".") or path
            )
        self.save_with_format(path, image_format)

    def save_with_format(self, path: str, image_format: ImageFormat) -> None:
        """Encode to ``path`` using ``image_format`` regardless of its extension."""
        if image_format.pillow_format is None:
            raise CodecUnsupportedError("format", image_format.extension)
        self._encode(path, image_format.pillow_format, image_format.extension)

    def _encode(self, path: str, pillow_format: str, label: str) -> None:
        logger.debug("encoding %s as %s", path, pillow_format)
        try:
            self._image.save(path, format=pillow_format)
        except KeyError as exc:
            raise CodecUnsupportedError("format", label) from exc
        except ValueError as exc:
            raise CodecParameterError(str(exc)) from exc
        except OSError as exc:
            if exc.errno is not None:
                raise CodecIoError(exc) from exc
            match = _UNSUPPORTED_MODE.search(str(exc))
            if match:
                raise CodecUnsupportedError("color", match.group(1)) from exc
            raise CodecEncodingError(str(exc)) from exc


class PillowReader:
    """Raw input bytes awaiting decoding."""

    def __init__(self, path: str, data: bytes) -> None:
        self._path = path
        self._data = data
        self._format = _extension_format(path)
        self._forced = False

    def set_format(self, image_format: ImageFormat) -> None:
        self._format = image_format
        self._forced = True

    def format(self) -> ImageFormat | None:
        return self._format

    def decode(self) -> PillowImage:
        """Decode the buffered bytes.

        Returns
        -------
        PillowImage
            Fully loaded image.

        Raises
        ------
        CodecError
            Classified decoding failure.
        """
        formats: list[str] | None = None
        if self._forced and self._format is not None:
            if self._format.pillow_format is None:
                raise CodecUnsupportedError("format", self._format.extension)
            formats = [self._format.pillow_format]

        label = self._format.extension if self._format is not None else "unknown"
        try:
            image = Image.open(io.BytesIO(self._data), formats=formats)
            image.load()
        except Image.DecompressionBombError as exc:
            raise CodecLimitsError(str(exc)) from exc
        except UnidentifiedImageError as exc:
            raise CodecUnsupportedError("format", label) from exc
        except KeyError as exc:
            raise CodecUnsupportedError("format", label) from exc
        except (OSError, SyntaxError, ValueError, EOFError, struct.error) as exc:
            raise CodecDecodingError(str(exc) or type(exc).__name__) from exc

        if not self._forced:
            self._format = from_pillow_format(image.format) or self._format
        logger.debug("decoded %s (%s, %s)", self._path, image.format, image.mode)
        return PillowImage(image)


class PillowCodec:
    """Default codec adapter backed by Pillow."""

    def open(self, path: str) -> PillowReader:
        """Read ``path`` into memory; ``OSError`` propagates to the caller."""
        return PillowReader(path, Path(path).read_bytes())
