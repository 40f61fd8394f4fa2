"""Subprocess wrappers for the external tools ytguard drives.

Two flavors:
- run_command: short queries whose output ytguard parses (ffprobe, the
  ``ffmpeg -encoders`` listing)
- run_passthrough: long jobs whose progress output belongs to the user's
  terminal (yt-dlp, ffmpeg encodes)

Neither applies a timeout unless the caller asks for one. Failure to start
the executable surfaces as OSError; callers wrap it in their own error type.
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess is required for tool invocation
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _run(
    args: list[str | Path], timeout: float | None, **kwargs: Any
) -> subprocess.CompletedProcess:
    str_args = [str(arg) for arg in args]
    tool = Path(str_args[0]).name if str_args else "unknown"

    logger.debug(
        "Executing command: %s",
        " ".join(str_args),
        extra={"command": tool, "arg_count": len(str_args)},
    )

    started = time.monotonic()
    try:
        result = subprocess.run(  # nosec B603 - argv list, no shell
            str_args, timeout=timeout, **kwargs
        )
    except subprocess.TimeoutExpired:
        logger.warning(
            "%s timed out after %ss", tool, timeout, extra={"command": tool}
        )
        raise

    logger.debug(
        "%s exited with status %d",
        tool,
        result.returncode,
        extra={
            "command": tool,
            "elapsed_seconds": round(time.monotonic() - started, 3),
            "returncode": result.returncode,
        },
    )
    return result


def run_command(
    args: list[str | Path],
    timeout: float | None = None,
    capture_output: bool = True,
    text: bool = True,
    errors: str = "replace",
    **kwargs: Any,
) -> tuple[str, str, int]:
    """Run a command and collect its output.

    Output is decoded as text with undecodable bytes replaced. To merge
    stderr into stdout pass ``capture_output=False`` with
    ``stdout=subprocess.PIPE, stderr=subprocess.STDOUT``.

    Args:
        args: Command and arguments. Path objects are converted to strings.
        timeout: Seconds to wait (None waits indefinitely).
        capture_output: Capture stdout and stderr separately.
        text: Decode output as text.
        errors: Decoding error handler.
        **kwargs: Passed to subprocess.run.

    Returns:
        Tuple of (stdout, stderr, returncode); missing streams are "".

    Raises:
        OSError: If the executable cannot be started.
        subprocess.TimeoutExpired: If a timeout was given and exceeded.
    """
    result = _run(
        args,
        timeout,
        capture_output=capture_output,
        text=text,
        errors=errors,
        **kwargs,
    )
    return result.stdout or "", result.stderr or "", result.returncode


def run_passthrough(
    args: list[str | Path],
    cwd: Path | None = None,
    timeout: float | None = None,
) -> int:
    """Run a command with stdin/stdout/stderr inherited.

    Returns:
        The process exit status.

    Raises:
        OSError: If the executable cannot be started.
        subprocess.TimeoutExpired: If a timeout was given and exceeded.
    """
    cwd_arg = None if cwd is None else str(cwd)
    return _run(args, timeout, cwd=cwd_arg).returncode
