"""Execution layer for ytguard.

- reencode: ReencodeExecutor, ffmpeg re-encode with write-then-replace
- ffmpeg_utils: temp file naming, output validation, cleanup
"""

from ytguard.executor import ffmpeg_utils
from ytguard.executor.reencode import ReencodeExecutor

__all__ = [
    "ReencodeExecutor",
    "ffmpeg_utils",
]
