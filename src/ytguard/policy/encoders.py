"""Encoder selection for re-encoding.

Picks a software (libx264/libx265) or NVENC encoder for the target codec
and builds the ffmpeg parameters for it.

| encoder mode | hardware available | encoder                  |
|--------------|--------------------|--------------------------|
| nvenc        | not probed         | h264_nvenc / hevc_nvenc  |
| cpu          | not probed         | libx264 / libx265        |
| auto         | yes                | h264_nvenc / hevc_nvenc  |
| auto         | no                 | libx264 / libx265        |
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ytguard.config.models import EncoderSlot, WrapperConfig
from ytguard.domain.enums import EncoderMode, OutputCodec
from ytguard.tools.detection import has_encoder

logger = logging.getLogger(__name__)

SOFTWARE_ENCODERS: dict[OutputCodec, str] = {
    OutputCodec.H264: "libx264",
    OutputCodec.H265: "libx265",
}

HARDWARE_ENCODERS: dict[OutputCodec, str] = {
    OutputCodec.H264: "h264_nvenc",
    OutputCodec.H265: "hevc_nvenc",
}

AUDIO_ENCODER = "aac"

EncoderProbe = Callable[[Path, str], bool]


@dataclass(frozen=True)
class EncoderSelection:
    """Chosen encoder and its full ffmpeg parameter set."""

    label: str
    """Encoder identifier, e.g. "libx265" or "hevc_nvenc"."""

    hardware: bool
    args: tuple[str, ...]
    """Parameters placed between the ffmpeg input and output."""


def build_encoder_args(
    encoder: str, slot: EncoderSlot, hardware: bool, audio_bitrate: str
) -> list[str]:
    """Build ffmpeg video/audio parameters for an encoder.

    Software encoders use ``-crf``, NVENC uses ``-cq``. Values are passed
    through as configured, including empty strings.

    Args:
        encoder: ffmpeg encoder identifier.
        slot: Preset/quality values for the encoder family.
        hardware: True for NVENC.
        audio_bitrate: AAC bitrate (e.g. "192k").

    Returns:
        Argument list.
    """
    quality_flag = "-cq" if hardware else "-crf"
    return [
        "-c:v",
        encoder,
        "-preset",
        slot.preset,
        quality_flag,
        slot.quality,
        "-c:a",
        AUDIO_ENCODER,
        "-b:a",
        audio_bitrate,
        "-movflags",
        "+faststart",
    ]


def _software_slot(config: WrapperConfig, codec: OutputCodec) -> EncoderSlot:
    return config.x265 if codec is OutputCodec.H265 else config.x264


def select_encoder(
    config: WrapperConfig,
    output_codec: OutputCodec,
    encoder_mode: EncoderMode,
    ffmpeg_path: Path,
    probe: EncoderProbe | None = None,
) -> EncoderSelection:
    """Select the encoder used to reach the output codec.

    Hardware availability is only probed in AUTO mode.

    Args:
        config: Wrapper configuration (preset/quality slots, audio bitrate).
        output_codec: Target video codec.
        encoder_mode: Allowed encoder family.
        ffmpeg_path: Path to ffmpeg, used for the hardware probe.
        probe: Encoder availability check (defaults to has_encoder).

    Returns:
        EncoderSelection.
    """
    hardware_encoder = HARDWARE_ENCODERS[output_codec]

    if encoder_mode is EncoderMode.HARDWARE:
        use_hardware = True
    elif encoder_mode is EncoderMode.CPU:
        use_hardware = False
    else:
        check = probe or has_encoder
        use_hardware = check(ffmpeg_path, hardware_encoder)
        logger.debug(
            "Hardware encoder %s %s",
            hardware_encoder,
            "available" if use_hardware else "not available",
        )

    if use_hardware:
        encoder = hardware_encoder
        slot = config.nvenc
    else:
        encoder = SOFTWARE_ENCODERS[output_codec]
        slot = _software_slot(config, output_codec)

    args = build_encoder_args(encoder, slot, use_hardware, config.audio_bitrate)
    return EncoderSelection(label=encoder, hardware=use_hardware, args=tuple(args))
