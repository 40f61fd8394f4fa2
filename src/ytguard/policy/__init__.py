"""Codec policy decisions.

- formats: yt-dlp format expression for a resolution/compatibility choice
- codecs: probed-codec matching against the target codec
- encoders: software vs NVENC encoder selection and parameters
"""

from ytguard.policy.codecs import normalize_codec, video_codec_matches
from ytguard.policy.encoders import (
    HARDWARE_ENCODERS,
    SOFTWARE_ENCODERS,
    EncoderSelection,
    build_encoder_args,
    select_encoder,
)
from ytguard.policy.formats import select_format

__all__ = [
    "HARDWARE_ENCODERS",
    "SOFTWARE_ENCODERS",
    "EncoderSelection",
    "build_encoder_args",
    "normalize_codec",
    "select_encoder",
    "select_format",
    "video_codec_matches",
]
