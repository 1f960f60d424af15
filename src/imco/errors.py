"""Closed error taxonomy raised by every conversion stage."""

from __future__ import annotations


class ImcoError(Exception):
    """Base class for all conversion errors.

    Subclasses form a closed set; :func:`describe` renders each of them.
    """

    exit_code: int = 1

    def __str__(self) -> str:
        return describe(self)


class UsageError(ImcoError):
    """Errors caused by the shape of the request rather than by file content."""

    exit_code = 2


class FailedFileRead(ImcoError):
    """I/O failure while opening or reading an input."""

    __match_args__ = ("reason", "path")

    def __init__(self, reason: str, path: str) -> None:
        super().__init__(reason, path)
        self.reason = reason
        self.path = path


class FailedFileWrite(ImcoError):
    """I/O failure while writing an output."""

    __match_args__ = ("reason", "path")

    def __init__(self, reason: str, path: str) -> None:
        super().__init__(reason, path)
        self.reason = reason
        self.path = path


class InvalidFormat(UsageError):
    """Unrecognized format token, or a path with a missing/unknown extension."""

    __match_args__ = ("token",)

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


class NoDestFormat(UsageError):
    """Neither an output path nor an output format is available."""


class InvalidBatching(UsageError):
    """Batch mode was requested without an output format."""


class Decoding(ImcoError):
    """Structural failure reported by the codec while decoding."""

    __match_args__ = ("path", "hint")

    def __init__(self, path: str, hint: str) -> None:
        super().__init__(path, hint)
        self.path = path
        self.hint = hint


class Encoding(ImcoError):
    """Structural failure reported by the codec while encoding."""

    __match_args__ = ("path", "hint")

    def __init__(self, path: str, hint: str) -> None:
        super().__init__(path, hint)
        self.path = path
        self.hint = hint


class Unsupported(ImcoError):
    """The codec refuses the request (color mode, format or feature)."""

    __match_args__ = ("path", "hint")

    def __init__(self, path: str, hint: str) -> None:
        super().__init__(path, hint)
        self.path = path
        self.hint = hint


class InternalConversionError(ImcoError):
    """Invalid-parameter class of codec failure."""

    __match_args__ = ("path",)

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path


class ResourceLimitReached(ImcoError):
    """A codec-enforced resource limit was exceeded."""

    __match_args__ = ("path",)

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path


class BatchPattern(UsageError):
    """A glob pattern could not be compiled."""

    __match_args__ = ("reason", "pattern")

    def __init__(self, reason: str, pattern: str) -> None:
        super().__init__(reason, pattern)
        self.reason = reason
        self.pattern = pattern


class BatchReadEntry(ImcoError):
    """A matched entry could not be read during batch expansion."""

    __match_args__ = ("reason",)

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def describe(error: ImcoError) -> str:
    """Render the single-line, user-facing message for ``error``.

    Parameters
    ----------
    error : ImcoError
        Any member of the error taxonomy.

    Returns
    -------
    str
        Message printed by the CLI.
    """
    match error:
        case FailedFileRead(reason, path):
            return f"Failed reading '{path}' => {reason}"
        case FailedFileWrite(reason, path):
            return f"Failed writing '{path}' => {reason}"
        case InvalidFormat(token):
            return f"Unknown format {token}, use --help for a list"
        case NoDestFormat():
            return "No output format provided (use --output-format)"
        case InvalidBatching():
            return "Batch processing requires an output format (use --output-format)"
        case Decoding(path, hint):
            return f"Error during decoding of '{path}' => {hint}"
        case Encoding(path, hint):
            return f"Error during encoding of '{path}' => {hint}"
        case Unsupported(path, hint):
            return f"{hint} during conversion of '{path}'"
        case InternalConversionError(path):
            return f"Internal error during conversion of '{path}'"
        case ResourceLimitReached(path):
            return f"Exceeded resource limitation during conversion of '{path}'"
        case BatchPattern(reason, pattern):
            return f"Invalid pattern '{pattern}' => {reason}"
        case BatchReadEntry(reason):
            return f"Failed reading batch entry => {reason}"
    raise TypeError(f"Unknown error variant: {type(error).__name__}")
