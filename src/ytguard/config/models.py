"""Configuration data models.

Raw settings are plain strings. WrapperConfig.from_mapping() is the one
normalization step that turns them into typed values; nothing downstream
re-parses configuration strings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from ytguard.domain.enums import EncoderMode, OutputCodec, Resolution

# Built-in defaults, applied before the settings file is read.
DEFAULT_SETTINGS: Mapping[str, str] = MappingProxyType(
    {
        "maxres": "best",
        "yt-dlp-path": "",
        "ffmpeg-path": "",
        "debug": "true",
        "always_compatible": "false",
        "output_codec": "h264",
        "encoder": "auto",
        # Only used when always_compatible=false and the codec is off-target
        "x264_preset": "fast",
        "x264_crf": "18",
        "x265_preset": "medium",
        "x265_crf": "22",
        "nvenc_preset": "p5",
        "nvenc_cq": "19",
        "audio_bitrate": "192k",
        "log_format": "text",
    }
)


def _is_true(value: str | None) -> bool:
    return (value or "").strip().casefold() == "true"


@dataclass(frozen=True)
class EncoderSlot:
    """Preset and quality values for one encoder family.

    ``quality`` is the CRF value for x264/x265 and the CQ value for NVENC.
    Empty strings are kept as-is and passed straight to ffmpeg.
    """

    preset: str
    quality: str


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for the debug log file."""

    enabled: bool = True
    """Whether log lines are written at all. Fixed for the process lifetime."""

    file: Path | None = None
    """Log file path (None = stderr)."""

    format: str = "text"
    """Log format: text or json."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass(frozen=True)
class WrapperConfig:
    """Typed, immutable wrapper configuration."""

    max_resolution: Resolution = Resolution.UNRESTRICTED
    always_compatible: bool = False
    ytdlp_dir: str = ""
    ffmpeg_dir: str = ""
    debug: bool = True
    output_codec: OutputCodec = OutputCodec.H264
    encoder_mode: EncoderMode = EncoderMode.AUTO
    x264: EncoderSlot = field(default_factory=lambda: EncoderSlot("fast", "18"))
    x265: EncoderSlot = field(default_factory=lambda: EncoderSlot("medium", "22"))
    nvenc: EncoderSlot = field(default_factory=lambda: EncoderSlot("p5", "19"))
    audio_bitrate: str = "192k"
    log_format: str = "text"

    @property
    def target_codec(self) -> OutputCodec:
        """Codec the final file must use.

        Compatibility mode forces H.264 regardless of output_codec.
        """
        if self.always_compatible:
            return OutputCodec.H264
        return self.output_codec

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, str] | None = None) -> WrapperConfig:
        """Build a config from raw settings.

        Args:
            overrides: Raw key/value settings (keys are case-folded here).
                Applied over DEFAULT_SETTINGS.

        Returns:
            Normalized WrapperConfig.
        """
        merged = dict(DEFAULT_SETTINGS)
        for key, value in (overrides or {}).items():
            merged[key.strip().casefold()] = value

        log_format = merged["log_format"].strip().casefold()
        if log_format not in ("text", "json"):
            log_format = "text"

        return cls(
            max_resolution=Resolution.parse(merged["maxres"]),
            always_compatible=_is_true(merged["always_compatible"]),
            ytdlp_dir=merged["yt-dlp-path"],
            ffmpeg_dir=merged["ffmpeg-path"],
            debug=merged["debug"].strip().casefold() != "false",
            output_codec=OutputCodec.parse(merged["output_codec"]),
            encoder_mode=EncoderMode.parse(merged["encoder"]),
            x264=EncoderSlot(merged["x264_preset"], merged["x264_crf"]),
            x265=EncoderSlot(merged["x265_preset"], merged["x265_crf"]),
            nvenc=EncoderSlot(merged["nvenc_preset"], merged["nvenc_cq"]),
            audio_bitrate=merged["audio_bitrate"],
            log_format=log_format,
        )

    def describe(self) -> str:
        """One-line summary of the effective settings for logging."""
        return (
            f"maxres={self.max_resolution.value} "
            f"always_compatible={str(self.always_compatible).lower()} "
            f"output_codec={self.output_codec.value} "
            f"encoder={self.encoder_mode.value} "
            f"ffmpeg_path={self.ffmpeg_dir or '-'}"
        )
