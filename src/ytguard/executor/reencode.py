"""Re-encode executor.

Encodes a downloaded file into a sibling temp file and, on success, moves
the temp file over the original. The original is never modified unless
ffmpeg finished and produced a non-empty file.
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess is required for FFmpeg invocation
from collections.abc import Sequence
from pathlib import Path

from ytguard.core.subprocess_utils import run_passthrough
from ytguard.exceptions import EncodeError, ReplaceError
from ytguard.executor import ffmpeg_utils

logger = logging.getLogger(__name__)


class ReencodeExecutor:
    """Executor for in-place re-encoding via ffmpeg."""

    def __init__(self, ffmpeg_path: Path, timeout: float | None = None) -> None:
        """Initialize the executor.

        Args:
            ffmpeg_path: Path to the ffmpeg executable.
            timeout: Maximum encode time in seconds (None = no limit).
        """
        self.ffmpeg_path = ffmpeg_path
        self.timeout = timeout

    def build_command(
        self, input_path: Path, encoder_args: Sequence[str], temp_path: Path
    ) -> list[str]:
        """Build the ffmpeg command for a re-encode."""
        return [
            str(self.ffmpeg_path),
            "-y",
            "-i",
            str(input_path),
            *encoder_args,
            str(temp_path),
        ]

    def execute(self, input_path: Path, encoder_args: Sequence[str]) -> Path:
        """Re-encode a file in place.

        Args:
            input_path: File to re-encode.
            encoder_args: Encoder parameters (see policy.encoders).

        Returns:
            The path of the replaced file (same as input_path).

        Raises:
            EncodeError: ffmpeg could not be started, failed, or produced no
                output. The original file is untouched and the partial temp
                file has been removed.
            ReplaceError: The temp file could not replace the original.
        """
        temp_path = ffmpeg_utils.create_temp_output(input_path)
        cmd = self.build_command(input_path, encoder_args, temp_path)

        logger.info(
            "Starting re-encode: %s",
            input_path,
            extra={"input_path": str(input_path), "command": " ".join(cmd)},
        )

        try:
            rc = run_passthrough(cmd, timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as e:
            ffmpeg_utils.cleanup_temp_file(temp_path)
            raise EncodeError(f"Failed to run ffmpeg: {e}") from e

        if rc != 0:
            ffmpeg_utils.cleanup_temp_file(temp_path)
            raise EncodeError(f"ffmpeg exited with status {rc}", returncode=rc)

        is_valid, error_msg = ffmpeg_utils.validate_output(temp_path)
        if not is_valid:
            ffmpeg_utils.cleanup_temp_file(temp_path)
            raise EncodeError(f"ffmpeg output validation failed: {error_msg}")

        self._replace(temp_path, input_path)
        return input_path

    def _replace(self, temp_path: Path, output_path: Path) -> None:
        """Move the temp file over the original.

        Path.replace() overwrites the destination atomically, so on failure
        the original is still in place and the temp file can go. If the
        original has disappeared, the temp file is the only copy and is kept.
        """
        try:
            temp_path.replace(output_path)
        except OSError as e:
            if output_path.exists():
                ffmpeg_utils.cleanup_temp_file(temp_path)
                kept = None
            else:
                kept = str(temp_path)
                logger.error("Re-encoded file kept at %s", temp_path)
            raise ReplaceError(
                f"Could not replace {output_path} with re-encoded file: {e}",
                temp_path=kept,
            ) from e

        logger.info("Moved temp file to final: %s", output_path)
