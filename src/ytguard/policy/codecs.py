"""Video codec names and matching.

ffprobe prints libavcodec names ("h264", "hevc", "vp9", "av1"). Container
tags and encoder names for the same codecs are folded onto those names so
a probed value can be compared with the target codec.
"""

from __future__ import annotations

from ytguard.domain.enums import OutputCodec

_CANONICAL_NAMES: dict[str, str] = {
    # H.264
    "avc": "h264",
    "avc1": "h264",
    "h.264": "h264",
    "x264": "h264",
    "libx264": "h264",
    "h264_nvenc": "h264",
    # H.265
    "h265": "hevc",
    "h.265": "hevc",
    "hvc1": "hevc",
    "hev1": "hevc",
    "x265": "hevc",
    "libx265": "hevc",
    "hevc_nvenc": "hevc",
    # Codecs YouTube serves at high resolutions
    "vp09": "vp9",
    "av01": "av1",
    "libaom-av1": "av1",
}


def normalize_codec(codec: str | None) -> str:
    """Map a codec name onto its ffprobe name (lowercase, trimmed).

    Unknown names are returned lowercased; None becomes "".
    """
    name = (codec or "").strip().casefold()
    return _CANONICAL_NAMES.get(name, name)


def video_codec_matches(current_codec: str | None, target: OutputCodec) -> bool:
    """Check if a probed video codec already satisfies the target codec.

    Args:
        current_codec: Codec name printed by ffprobe.
        target: Required output codec.

    Returns:
        True if no re-encode is needed. An empty probe result (no video
        stream) never matches.
    """
    normalized = normalize_codec(current_codec)
    return bool(normalized) and normalized == target.probe_name
