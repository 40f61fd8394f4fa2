"""External tool support for ytguard.

- executable_name / tool_path: locate yt-dlp, ffmpeg and ffprobe
- has_encoder: check an ffmpeg build for an encoder (e.g. NVENC)
"""

from ytguard.tools.detection import (
    FFMPEG,
    FFPROBE,
    YTDLP,
    executable_name,
    has_encoder,
    tool_path,
)

__all__ = [
    "FFMPEG",
    "FFPROBE",
    "YTDLP",
    "executable_name",
    "has_encoder",
    "tool_path",
]
