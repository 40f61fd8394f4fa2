"""External tool location and capability detection.

This module resolves the executables ytguard drives (yt-dlp, ffmpeg,
ffprobe) from their configured directories and checks which encoders the
ffmpeg build offers.
"""

import logging
import platform
import re
import subprocess  # nosec B404 - subprocess is required for tool detection
from pathlib import Path

from ytguard.core.subprocess_utils import run_command

logger = logging.getLogger(__name__)

YTDLP = "yt-dlp"
FFMPEG = "ffmpeg"
FFPROBE = "ffprobe"


def executable_name(name: str) -> str:
    """Return the platform-specific executable file name for a tool.

    Args:
        name: Tool name (e.g., "ffmpeg").

    Returns:
        ``name.exe`` on Windows, ``name`` elsewhere.
    """
    if platform.system() == "Windows":
        return f"{name}.exe"
    return name


def tool_path(directory: str, name: str) -> Path:
    """Build the path to a tool inside a configured directory.

    An empty directory yields the bare executable name, which the OS then
    looks up on PATH.

    Args:
        directory: Configured tool directory (may be empty).
        name: Tool name (e.g., "yt-dlp").

    Returns:
        Path to the tool executable.
    """
    exe = executable_name(name)
    if not directory:
        return Path(exe)
    return Path(directory) / exe


def _parse_ffmpeg_list(output: str, pattern: str) -> set[str]:
    """Parse ffmpeg list output (encoders, decoders).

    Args:
        output: Command output.
        pattern: Regex pattern with a single capture group for the name.

    Returns:
        Set of names (lowercase).
    """
    compiled = re.compile(pattern)
    return {
        match.group(1).casefold()
        for line in output.split("\n")
        if (match := compiled.match(line))
    }


def _parse_codec_list(output: str) -> set[str]:
    """Parse ffmpeg -encoders or -decoders output."""
    # Format: " V....D codec_name    Description..."
    return _parse_ffmpeg_list(output, r"\s+[VASFXBDI.]{6}\s+(\S+)")


def has_encoder(ffmpeg_path: Path, encoder: str) -> bool:
    """Check whether an ffmpeg build lists an encoder.

    Never raises: any failure to run the listing is logged and treated as
    "encoder not available".

    Args:
        ffmpeg_path: Path to ffmpeg executable.
        encoder: Encoder identifier (e.g., "h264_nvenc").

    Returns:
        True if the encoder appears in ``ffmpeg -encoders``.
    """
    try:
        stdout, stderr, rc = run_command(
            [ffmpeg_path, "-hide_banner", "-encoders"],
            capture_output=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("Failed to enumerate ffmpeg encoders: %s", e)
        return False

    if rc != 0:
        logger.warning(
            "Failed to enumerate ffmpeg encoders (exit %d): %s", rc, stdout.strip()
        )
        return False

    encoders = _parse_codec_list(stdout)
    if encoders:
        return encoder.casefold() in encoders

    # Unrecognized listing layout, fall back to a plain search
    return encoder in stdout
