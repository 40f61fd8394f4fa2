"""Introspector module for ytguard.

- probe_video_codec: report the first video stream's codec via ffprobe
- InspectionError: raised when ffprobe fails
"""

from ytguard.exceptions import InspectionError
from ytguard.introspector.ffprobe import build_probe_command, probe_video_codec

__all__ = [
    "InspectionError",
    "build_probe_command",
    "probe_video_codec",
]
