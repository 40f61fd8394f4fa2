"""Downloader module for ytguard.

- arguments: parse, rewrite and resolve yt-dlp argument lists
- runner: invoke the real yt-dlp
"""

from ytguard.downloader.arguments import (
    OutputOption,
    ParsedArguments,
    parse_arguments,
    resolve_output_path,
    rewrite_arguments,
    with_extension_template,
)
from ytguard.downloader.runner import run_downloader

__all__ = [
    "OutputOption",
    "ParsedArguments",
    "parse_arguments",
    "resolve_output_path",
    "rewrite_arguments",
    "run_downloader",
    "with_extension_template",
]
