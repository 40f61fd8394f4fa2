"""yt-dlp invocation."""

import logging
import subprocess  # nosec B404 - subprocess is required for yt-dlp invocation
from pathlib import Path

from ytguard.core.subprocess_utils import run_passthrough
from ytguard.exceptions import DownloadError

logger = logging.getLogger(__name__)


def run_downloader(ytdlp_path: Path, args: list[str], cwd: Path | None = None) -> None:
    """Run yt-dlp with inherited stdout/stderr.

    Args:
        ytdlp_path: Path to the real yt-dlp executable.
        args: Final argument list.
        cwd: Working directory (default: current directory).

    Raises:
        DownloadError: If yt-dlp cannot be started or exits non-zero.
    """
    workdir = (cwd or Path.cwd()).absolute()
    try:
        rc = run_passthrough([ytdlp_path, *args], cwd=workdir)
    except (OSError, subprocess.SubprocessError) as e:
        raise DownloadError(f"Error running yt-dlp: {e}") from e

    if rc != 0:
        raise DownloadError(f"Error running yt-dlp: exit status {rc}", returncode=rc)
