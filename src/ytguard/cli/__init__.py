"""CLI module for ytguard.

ytguard is installed in place of yt-dlp, so the command accepts any
arguments and hands all of them, unparsed, to the wrapper pipeline.
"""

import logging
import sys

import click

from ytguard.config import (
    build_logging_config,
    get_app_dir,
    get_config,
    get_default_config_path,
)
from ytguard.exceptions import ConfigResolutionError, YtGuardError
from ytguard.logging import configure_logging, hold_startup_records
from ytguard.workflow import WrapperProcessor

logger = logging.getLogger(__name__)


class PassthroughCommand(click.Command):
    """Command that forwards every token verbatim.

    Regular click parsing would consume ``--``, ``--help`` and
    ``--version``; all of them belong to yt-dlp here.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params["args"] = tuple(args)
        ctx.args = []
        return []


@click.command(cls=PassthroughCommand, add_help_option=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args: tuple[str, ...]) -> None:
    """Run yt-dlp with a codec-aware format policy, then enforce the codec."""
    hold_startup_records()

    try:
        app_dir = get_app_dir()
    except ConfigResolutionError:
        # Logging is not configured yet; there is nowhere to report this.
        raise SystemExit(1) from None

    config_path = get_default_config_path(app_dir)
    config = get_config(config_path)
    configure_logging(build_logging_config(config, app_dir))

    if not config_path.is_file():
        logger.info("INI not found, using default settings")

    try:
        WrapperProcessor(config).run(list(args))
    except YtGuardError as e:
        logger.error("%s", e)
        raise SystemExit(1) from e


def run() -> None:
    """Console script entry point.

    Windows wildcard expansion is disabled: yt-dlp format expressions such
    as ``bestvideo[height<=720]`` look like glob patterns.
    """
    main(args=sys.argv[1:], windows_expand_args=False)
