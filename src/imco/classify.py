"""Map low-level I/O and codec failures onto the error taxonomy."""

from __future__ import annotations

import errno

from imco.application.ports import (
    CodecDecodingError,
    CodecEncodingError,
    CodecIoError,
    CodecLimitsError,
    CodecParameterError,
    CodecUnsupportedError,
)
from imco.errors import (
    Decoding,
    Encoding,
    FailedFileRead,
    FailedFileWrite,
    ImcoError,
    InternalConversionError,
    ResourceLimitReached,
    Unsupported,
)
from imco.types import IoReason

_REASON_BY_TYPE: tuple[tuple[type[OSError], IoReason], ...] = (
    (FileNotFoundError, "Not found"),
    (PermissionError, "Permission denied"),
    (FileExistsError, "Already exists"),
    (NotADirectoryError, "Is not a directory"),
    (IsADirectoryError, "Is a directory"),
)

_REASON_BY_ERRNO: dict[int, IoReason] = {
    errno.ENOENT: "Not found",
    errno.EACCES: "Permission denied",
    errno.EPERM: "Permission denied",
    errno.EEXIST: "Already exists",
    errno.ENOTDIR: "Is not a directory",
    errno.EISDIR: "Is a directory",
    errno.ENOSPC: "Storage is full",
    errno.EFBIG: "File is too large",
}
if hasattr(errno, "EDQUOT"):
    _REASON_BY_ERRNO[errno.EDQUOT] = "Storage is full"


def io_reason(os_error: OSError) -> IoReason:
    """Return the bounded-vocabulary reason for an ``OSError``."""
    for error_type, reason in _REASON_BY_TYPE:
        if isinstance(os_error, error_type):
            return reason
    if os_error.errno is not None:
        return _REASON_BY_ERRNO.get(os_error.errno, "Unknown (unhandled)")
    return "Unknown (unhandled)"


def classify_io(os_error: OSError, path: str, is_read: bool) -> ImcoError:
    """Translate an ``OSError`` into ``FailedFileRead`` or ``FailedFileWrite``."""
    reason = io_reason(os_error)
    if is_read:
        return FailedFileRead(reason, path)
    return FailedFileWrite(reason, path)


def unsupported_hint(error: CodecUnsupportedError) -> str:
    match error.kind:
        case "color":
            return f"Unsupported color ({error.subject})"
        case "format":
            return f"Unsupported image format or not allowed format ({error.subject})"
        case "feature":
            return error.subject or "Other"
    return "Other"


def classify_codec(
    codec_error: BaseException, path: str, is_read: bool = False
) -> ImcoError:
    """Translate a codec failure into the error taxonomy.

    Parameters
    ----------
    codec_error : BaseException
        Error raised by the codec port. Kinds outside the port contract fall
        into the internal-error bucket instead of propagating.
    path : str
        Input path the conversion was working on.
    is_read : bool, default=False
        Whether an I/O failure inside the codec happened while reading.

    Returns
    -------
    ImcoError
        Classified error; never raises.
    """
    match codec_error:
        case CodecDecodingError():
            return Decoding(path, codec_error.hint)
        case CodecEncodingError():
            return Encoding(path, codec_error.hint)
        case CodecParameterError():
            return InternalConversionError(path)
        case CodecLimitsError():
            return ResourceLimitReached(path)
        case CodecUnsupportedError():
            return Unsupported(path, unsupported_hint(codec_error))
        case CodecIoError():
            return classify_io(codec_error.os_error, path, is_read)
        case ImcoError():
            return codec_error
        case OSError():
            return classify_io(codec_error, path, is_read)
    return InternalConversionError(path)
