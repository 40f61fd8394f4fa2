"""Temp file helpers for in-place re-encoding.

ffmpeg writes ``<name>.tmp.mp4`` next to the downloaded file; only a
non-empty result is allowed to replace the original.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp.mp4"


def create_temp_output(output_path: Path, suffix: str = TEMP_SUFFIX) -> Path:
    """Sibling path ffmpeg encodes into.

    The suffix ends in a container extension so ffmpeg picks the muxer
    from the file name.
    """
    return output_path.with_name(output_path.name + suffix)


def validate_output(output_path: Path) -> tuple[bool, str | None]:
    """Check that ffmpeg left a non-empty file behind.

    Returns:
        Tuple of (is_valid, error_message); error_message is None if valid.
    """
    try:
        size = output_path.stat().st_size
    except FileNotFoundError:
        return False, f"Output file does not exist: {output_path}"
    except OSError as e:
        return False, f"Could not stat output file: {e}"

    if size == 0:
        return False, f"Output file is empty: {output_path}"
    return True, None


def cleanup_temp_file(path: Path) -> None:
    """Delete a temp file if present. Failures are logged, never raised."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not clean up temp file %s: %s", path, e)
    else:
        logger.debug("Removed temp file: %s", path)
