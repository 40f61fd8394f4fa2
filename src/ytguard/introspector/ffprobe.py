"""FFprobe-based video codec inspection."""

import subprocess  # nosec B404 - subprocess is required for ffprobe invocation
from pathlib import Path

from ytguard.core.subprocess_utils import run_command
from ytguard.exceptions import InspectionError


def build_probe_command(ffprobe_path: Path, file_path: Path) -> list[str]:
    """Build the ffprobe command that prints only the first video codec."""
    return [
        str(ffprobe_path),
        "-v",
        "error",
        "-select_streams",
        "v:0",
        "-show_entries",
        "stream=codec_name",
        "-of",
        "default=nw=1:nk=1",
        str(file_path),
    ]


def probe_video_codec(ffprobe_path: Path, file_path: Path) -> str:
    """Get the codec name of a file's first video stream.

    Args:
        ffprobe_path: Path to the ffprobe executable.
        file_path: Media file to inspect.

    Returns:
        Codec name as printed by ffprobe (e.g. "h264", "vp9", "av1").

    Raises:
        InspectionError: If ffprobe cannot be started or exits non-zero.
            The error carries ffprobe's combined stdout/stderr.
    """
    try:
        output, _, rc = run_command(
            build_probe_command(ffprobe_path, file_path),
            capture_output=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        raise InspectionError(f"ffprobe failed for {file_path}: {e}") from e

    if rc != 0:
        raise InspectionError(
            f"ffprobe failed for {file_path}: exit status {rc} ({output.strip()})",
            output=output,
        )

    return output.strip()
