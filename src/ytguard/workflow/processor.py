"""Wrapper run orchestration.

Runs the full pipeline for one invocation:

    format selection -> argument rewrite -> yt-dlp
        -> (best-quality mode) ffprobe -> encoder selection -> re-encode

Failures before and during the download are fatal. After a successful
download, anything that leaves the original file intact ends the run
successfully; encode and replace failures are fatal.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ytguard.config.models import WrapperConfig
from ytguard.domain.enums import RunOutcome
from ytguard.downloader.arguments import resolve_output_path, rewrite_arguments
from ytguard.downloader.runner import run_downloader
from ytguard.exceptions import InspectionError
from ytguard.executor.reencode import ReencodeExecutor
from ytguard.introspector.ffprobe import probe_video_codec
from ytguard.policy.codecs import video_codec_matches
from ytguard.policy.encoders import EncoderSelection, select_encoder
from ytguard.policy.formats import select_format
from ytguard.tools.detection import FFMPEG, FFPROBE, YTDLP, tool_path

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Result of a wrapper run that did not fail fatally."""

    outcome: RunOutcome
    final_args: list[str] = field(default_factory=list)
    output_path: Path | None = None
    probed_codec: str | None = None
    encoder: EncoderSelection | None = None


class WrapperProcessor:
    """Orchestrates download and codec enforcement for one invocation."""

    def __init__(self, config: WrapperConfig, cwd: Path | None = None) -> None:
        """Initialize the processor.

        Args:
            config: Effective wrapper configuration.
            cwd: Directory yt-dlp runs in (default: current directory).
        """
        self.config = config
        self.cwd = cwd
        self.ytdlp_path = tool_path(config.ytdlp_dir, YTDLP)
        self.ffmpeg_path = tool_path(config.ffmpeg_dir, FFMPEG)
        self.ffprobe_path = tool_path(config.ffmpeg_dir, FFPROBE)

    def prepare_arguments(self, args: list[str]) -> list[str]:
        """Compute the final yt-dlp argument list."""
        format_expression = select_format(
            self.config.max_resolution, self.config.always_compatible
        )
        return rewrite_arguments(args, format_expression, self.config.ffmpeg_dir)

    def run(self, args: list[str]) -> RunResult:
        """Run the wrapper.

        Args:
            args: Caller's argument list, verbatim.

        Returns:
            RunResult describing how the run ended.

        Raises:
            DownloadError: yt-dlp failed.
            EncodeError: Re-encoding failed.
            ReplaceError: The re-encoded file could not replace the original.
        """
        logger.info("Original args: %s", " ".join(args))
        logger.info("Config: %s", self.config.describe())

        final_args = self.prepare_arguments(args)
        logger.info("Final yt-dlp args: %s", " ".join(final_args))

        run_downloader(self.ytdlp_path, final_args, cwd=self.cwd)

        if self.config.always_compatible:
            return RunResult(RunOutcome.COMPATIBILITY_SKIP, final_args)
        if not self.config.ffmpeg_dir:
            logger.info("ffmpeg-path not configured; skipping codec check.")
            return RunResult(RunOutcome.NO_FFMPEG_SKIP, final_args)

        return self.enforce_codec(final_args)

    def enforce_codec(self, final_args: list[str]) -> RunResult:
        """Probe the downloaded file and re-encode it if needed."""
        output_path = resolve_output_path(final_args, cwd=self.cwd)
        if output_path is None:
            logger.info(
                "Could not resolve output path from -o; "
                "skipping codec check/re-encode."
            )
            return RunResult(RunOutcome.PATH_UNRESOLVED, final_args)

        if not output_path.is_file():
            logger.info("Output file not found for codec check: %s", output_path)
            return RunResult(RunOutcome.FILE_MISSING, final_args, output_path)

        try:
            codec = probe_video_codec(self.ffprobe_path, output_path)
        except InspectionError as e:
            logger.warning("ffprobe error: %s", e)
            return RunResult(RunOutcome.PROBE_FAILED, final_args, output_path)

        logger.info("Detected video codec: %s", codec)

        target = self.config.target_codec
        if video_codec_matches(codec, target):
            logger.info("Already %s, skipping re-encode.", target.label)
            return RunResult(RunOutcome.ALREADY_TARGET, final_args, output_path, codec)

        selection = select_encoder(
            self.config, target, self.config.encoder_mode, self.ffmpeg_path
        )
        logger.info(
            "Re-encoding to %s with %s %s (%s)...",
            target.label,
            "hardware" if selection.hardware else "software",
            selection.label,
            " ".join(selection.args),
        )
        ReencodeExecutor(self.ffmpeg_path).execute(output_path, selection.args)
        logger.info("Re-encode done.")

        return RunResult(
            RunOutcome.REENCODED, final_args, output_path, codec, selection
        )
