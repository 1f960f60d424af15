"""Format resolution from user tokens and file extensions."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath

from imco.errors import InvalidFormat


class ImageFormat(Enum):
    """Canonical image encodings.

    Each value is ``(extensions, pillow_format)``. The first extension is the
    canonical one used for derived file names and reports.
    """

    AVIF = (("avif",), "AVIF")
    JPEG = (("jpg", "jpeg", "jfif"), "JPEG")
    PNG = (("png", "apng"), "PNG")
    GIF = (("gif",), "GIF")
    WEBP = (("webp",), "WEBP")
    TIFF = (("tiff", "tif"), "TIFF")
    TGA = (("tga",), "TGA")
    DDS = (("dds",), "DDS")
    BMP = (("bmp",), "BMP")
    ICO = (("ico",), "ICO")
    HDR = (("hdr",), None)
    OPENEXR = (("exr",), None)
    PNM = (("pbm", "pam", "ppm", "pgm"), "PPM")
    FARBFELD = (("ff",), None)
    QOI = (("qoi",), "QOI")
    PCX = (("pcx",), "PCX")

    @property
    def extensions(self) -> tuple[str, ...]:
        return self.value[0]

    @property
    def extension(self) -> str:
        """Canonical extension, without the leading dot."""
        return self.value[0][0]

    @property
    def pillow_format(self) -> str | None:
        return self.value[1]


_BY_EXTENSION: dict[str, ImageFormat] = {
    ext: fmt for fmt in ImageFormat for ext in fmt.extensions
}


def normalize_token(token: str) -> str:
    """Lower-case ``token`` and drop surrounding blanks and one leading dot."""
    normalized = token.strip().lower()
    if normalized.startswith("."):
        normalized = normalized[1:]
    return normalized


def supported_tokens() -> list[str]:
    """Return every accepted format token, grouped by format."""
    return [ext for fmt in ImageFormat for ext in fmt.extensions]


def resolve(token: str) -> ImageFormat:
    """Resolve a user-supplied format token.

    Parameters
    ----------
    token : str
        Extension-like token such as ``"png"``, ``".JPG"`` or ``"tif"``.

    Returns
    -------
    ImageFormat
        Matching canonical format.

    Raises
    ------
    InvalidFormat
        If the token is not a supported extension.
    """
    try:
        return _BY_EXTENSION[normalize_token(token)]
    except KeyError as exc:
        raise InvalidFormat(token) from exc


def resolve_from_path(path: str) -> ImageFormat:
    """Infer the format from the extension of the last component of ``path``.

    Raises
    ------
    InvalidFormat
        If the path has no extension or the extension is not supported.
    """
    suffix = PurePath(path).suffix
    if not suffix:
        raise InvalidFormat(path)
    try:
        return _BY_EXTENSION[normalize_token(suffix)]
    except KeyError as exc:
        raise InvalidFormat(path) from exc


def from_pillow_format(name: str | None) -> ImageFormat | None:
    """Map a Pillow format name (``Image.format``) back to a canonical format."""
    if not name:
        return None
    upper = name.upper()
    if upper == "MPO":
        return ImageFormat.JPEG
    for fmt in ImageFormat:
        if fmt.pillow_format == upper:
            return fmt
    return None
