"""Exception hierarchy for ytguard.

Errors raised before or during the download are fatal. Errors raised while
post-processing a successful download are fatal only when the original file
may already have been touched (EncodeError, ReplaceError); InspectionError is
logged and treated as "nothing to do".
"""


class YtGuardError(Exception):
    """Base exception for all ytguard errors."""

    pass


class ConfigResolutionError(YtGuardError):
    """Raised when the application directory cannot be determined."""

    pass


class DownloadError(YtGuardError):
    """Raised when the yt-dlp process fails or cannot be started."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class InspectionError(YtGuardError):
    """Raised when ffprobe fails to report a video codec.

    Attributes:
        output: Combined stdout/stderr of the ffprobe invocation.
    """

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


class EncodeError(YtGuardError):
    """Raised when the ffmpeg re-encode fails. The original file is intact."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class ReplaceError(YtGuardError):
    """Raised when the re-encoded file cannot replace the original."""

    def __init__(self, message: str, temp_path: str | None = None) -> None:
        super().__init__(message)
        self.temp_path = temp_path
