"""yt-dlp argument parsing and rewriting.

The caller's argument list is parsed once into ParsedArguments: the options
ytguard cares about (format, output template, ffmpeg location) become
structured fields, everything else stays an opaque passthrough list in its
original order. Rewriting edits the structured fields and renders the list
back, so the caller's options keep their relative positions.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

FORMAT_FLAGS = ("-f", "--format")
OUTPUT_FLAGS = ("-o", "--output")
FFMPEG_LOCATION_FLAG = "--ffmpeg-location"

# Callers (launchers, media managers) often force "-f mp4", which would
# override the computed format expression.
FORCED_FORMAT = "mp4"

MERGE_CONTAINER = "mp4"
EXT_TEMPLATE = "%(ext)s"
TEMPLATE_MARKER = "%("


@dataclass
class OutputOption:
    """An output-template option and where it sits in the argument list."""

    flag: str
    value: str
    position: int
    """Index in the passthrough list before which the option is rendered."""


@dataclass
class ParsedArguments:
    """Structured view of a yt-dlp argument list."""

    passthrough: list[str] = field(default_factory=list)
    outputs: list[OutputOption] = field(default_factory=list)
    stripped_forced_formats: int = 0
    """Number of caller ``-f mp4`` pairs that were dropped."""

    @property
    def output(self) -> OutputOption | None:
        """The first output option, used to locate the downloaded file."""
        return self.outputs[0] if self.outputs else None

    def render(self) -> list[str]:
        """Render back to a flat argument list."""
        by_position: dict[int, list[OutputOption]] = {}
        for option in self.outputs:
            by_position.setdefault(option.position, []).append(option)

        result: list[str] = []
        for index in range(len(self.passthrough) + 1):
            for option in by_position.get(index, []):
                result.extend((option.flag, option.value))
            if index < len(self.passthrough):
                result.append(self.passthrough[index])
        return result


def parse_arguments(args: list[str]) -> ParsedArguments:
    """Parse a yt-dlp argument list.

    ``-f mp4`` / ``--format mp4`` pairs are dropped. Output options are
    lifted out of the passthrough list. A trailing flag without a value is
    passed through untouched.

    Args:
        args: Caller's argument tokens.

    Returns:
        ParsedArguments.
    """
    parsed = ParsedArguments()
    tokens = iter(enumerate(args))
    last_index = len(args) - 1

    for index, arg in tokens:
        has_value = index < last_index

        if arg in FORMAT_FLAGS and has_value:
            _, value = next(tokens)
            if value == FORCED_FORMAT:
                parsed.stripped_forced_formats += 1
                continue
            parsed.passthrough.extend((arg, value))
        elif arg in OUTPUT_FLAGS and has_value:
            _, value = next(tokens)
            parsed.outputs.append(
                OutputOption(flag=arg, value=value, position=len(parsed.passthrough))
            )
        elif arg == FFMPEG_LOCATION_FLAG and has_value:
            _, value = next(tokens)
            parsed.passthrough.extend((arg, value))
        else:
            parsed.passthrough.append(arg)

    return parsed


def _is_directory_value(value: str) -> bool:
    return value.endswith(("/", os.sep))


def with_extension_template(value: str) -> str:
    """Make an output value end in the ``%(ext)s`` template.

    Values that already contain a template token, and directory-only
    values, are returned unchanged. A trailing ``.mp4`` (any case) is
    replaced by the template.

    Args:
        value: Output template value.

    Returns:
        Adjusted output template.
    """
    if TEMPLATE_MARKER in value or _is_directory_value(value):
        return value

    suffix = f".{MERGE_CONTAINER}"
    if value.lower().endswith(suffix):
        value = value[: -len(suffix)]
        logger.debug("Stripped %s extension from output path", suffix)

    return f"{value}.{EXT_TEMPLATE}"


def rewrite_arguments(
    original_args: list[str], format_expression: str, ffmpeg_dir: str = ""
) -> list[str]:
    """Rewrite the caller's yt-dlp arguments.

    Note that this is not idempotent: a caller format other than ``mp4`` is
    kept, so rewriting an already rewritten list adds a second ``-f``.

    Args:
        original_args: Caller's argument tokens.
        format_expression: Computed ``-f`` expression.
        ffmpeg_dir: Directory containing ffmpeg (empty = not configured).

    Returns:
        Final argument list for yt-dlp.
    """
    parsed = parse_arguments(original_args)
    if parsed.stripped_forced_formats:
        logger.debug(
            "Removed %d forced -f %s option(s)",
            parsed.stripped_forced_formats,
            FORCED_FORMAT,
        )

    for option in parsed.outputs:
        adjusted = with_extension_template(option.value)
        if adjusted != option.value:
            logger.debug("Adjusted output to: %s", adjusted)
            option.value = adjusted

    tail = ["-f", format_expression]
    if ffmpeg_dir:
        tail.extend((FFMPEG_LOCATION_FLAG, ffmpeg_dir))
        logger.debug("Set ffmpeg path: %s", ffmpeg_dir)
    tail.extend(("--merge-output-format", MERGE_CONTAINER, "--no-keep-video"))

    return parsed.render() + tail


def resolve_output_path(args: list[str], cwd: Path | None = None) -> Path | None:
    """Resolve the file yt-dlp wrote from the final argument list.

    Only simple templates can be resolved: ``%(ext)s`` is replaced by the
    merge container's extension and any other template token makes the
    path unresolvable.

    Args:
        args: Final argument list passed to yt-dlp.
        cwd: Directory yt-dlp ran in (default: current directory).

    Returns:
        Absolute path to the downloaded file, or None if it can't be
        determined (no output option, other template tokens, directory).
    """
    option = parse_arguments(args).output
    if option is None:
        return None

    value = option.value.replace(EXT_TEMPLATE, MERGE_CONTAINER)
    if TEMPLATE_MARKER in value or _is_directory_value(value):
        return None

    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (cwd or Path.cwd()) / path

    if path.is_dir():
        return None
    return path.absolute()
