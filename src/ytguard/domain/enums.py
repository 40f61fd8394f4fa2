"""Domain enums for ytguard.

Each enum exposes a ``parse`` classmethod that is the single place raw
configuration strings are turned into typed values. Unrecognized strings
never raise; they normalize to the documented default member.
"""

from __future__ import annotations

from enum import Enum


class Resolution(Enum):
    """Maximum resolution preference for downloads."""

    P480 = "480p"
    P720 = "720p"
    P1080 = "1080p"
    UHD_4K = "4k"
    UNRESTRICTED = "best"

    @property
    def max_height(self) -> int | None:
        """Height ceiling in pixels, or None for no ceiling."""
        return _MAX_HEIGHTS[self]

    @classmethod
    def parse(cls, value: str | None) -> Resolution:
        """Parse a resolution string (case-insensitive).

        Unrecognized or empty values fall back to UNRESTRICTED.
        """
        normalized = (value or "").strip().casefold()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.UNRESTRICTED


_MAX_HEIGHTS: dict[Resolution, int | None] = {
    Resolution.P480: 480,
    Resolution.P720: 720,
    Resolution.P1080: 1080,
    Resolution.UHD_4K: 2160,
    Resolution.UNRESTRICTED: None,
}


class OutputCodec(Enum):
    """Video codec that downloaded files must end up in."""

    H264 = "h264"
    H265 = "h265"

    @property
    def probe_name(self) -> str:
        """Codec name as reported by ffprobe."""
        return "hevc" if self is OutputCodec.H265 else "h264"

    @property
    def label(self) -> str:
        """Human-readable codec label."""
        return "H.265" if self is OutputCodec.H265 else "H.264"

    @classmethod
    def parse(cls, value: str | None) -> OutputCodec:
        """Parse an output codec string.

        Accepts h265/hevc/x265 for H.265; everything else is H.264.
        """
        normalized = (value or "").strip().casefold().replace(".", "")
        if normalized in ("h265", "hevc", "x265"):
            return cls.H265
        return cls.H264


class EncoderMode(Enum):
    """Which encoder family may be used for re-encoding."""

    AUTO = "auto"  # Prefer NVENC when the ffmpeg build offers it
    CPU = "cpu"  # libx264 / libx265 only
    HARDWARE = "nvenc"  # h264_nvenc / hevc_nvenc only

    @classmethod
    def parse(cls, value: str | None) -> EncoderMode:
        """Parse an encoder mode string; unrecognized values become AUTO."""
        normalized = (value or "").strip().casefold()
        if normalized in ("cpu", "software"):
            return cls.CPU
        if normalized in ("nvenc", "gpu", "hardware"):
            return cls.HARDWARE
        return cls.AUTO


class RunOutcome(Enum):
    """Terminal state of a wrapper run that did not fail fatally."""

    COMPATIBILITY_SKIP = "compatibility_skip"  # avc1 already enforced at download
    NO_FFMPEG_SKIP = "no_ffmpeg_skip"  # ffmpeg-path not configured
    PATH_UNRESOLVED = "path_unresolved"  # -o missing, templated, or a directory
    FILE_MISSING = "file_missing"  # resolved output file does not exist
    PROBE_FAILED = "probe_failed"  # ffprobe failed, re-encode skipped
    ALREADY_TARGET = "already_target"  # probed codec matches target
    REENCODED = "reencoded"  # file re-encoded and replaced
