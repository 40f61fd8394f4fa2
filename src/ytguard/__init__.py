"""ytguard - a drop-in yt-dlp wrapper that enforces a video codec policy.

ytguard rewrites the format selection passed to yt-dlp, runs the real
downloader, and re-encodes the result with ffmpeg when the produced file
does not use the configured target codec.
"""

__version__ = "0.3.0"
