"""yt-dlp format selection.

Builds the ``-f`` expression handed to yt-dlp. Best-quality mode lets yt-dlp
pick any codec (often AV1/VP9 at high resolutions); compatibility mode pins
the video stream to the avc1 (H.264) family, which on YouTube usually caps
the result at 1080p.
"""

from __future__ import annotations

from ytguard.domain.enums import Resolution

H264_CODEC_FILTER = "[vcodec^=avc1]"


def _height_filter(resolution: Resolution) -> str:
    height = resolution.max_height
    if height is None:
        return ""
    return f"[height<={height}]"


def select_format(resolution: Resolution | str, compatibility_mode: bool) -> str:
    """Build the yt-dlp format expression.

    The expression prefers the best video+audio pair matching the filters,
    falling back to the best single stream matching the same filters.

    Args:
        resolution: Maximum resolution (enum or raw config string).
        compatibility_mode: Restrict video to H.264 (avc1).

    Returns:
        Format expression, e.g.
        ``bestvideo[vcodec^=avc1][height<=720]+bestaudio/best[vcodec^=avc1][height<=720]``.
    """
    if not isinstance(resolution, Resolution):
        resolution = Resolution.parse(resolution)

    filters = _height_filter(resolution)
    if compatibility_mode:
        filters = H264_CODEC_FILTER + filters

    return f"bestvideo{filters}+bestaudio/best{filters}"
