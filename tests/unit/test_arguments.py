"""Unit tests for yt-dlp argument parsing and rewriting."""

from pathlib import Path

import pytest

from ytguard.downloader.arguments import (
    parse_arguments,
    resolve_output_path,
    rewrite_arguments,
    with_extension_template,
)

EXPR = "bestvideo[height<=720]+bestaudio/best[height<=720]"
TAIL = ["-f", EXPR, "--merge-output-format", "mp4", "--no-keep-video"]
URL = "https://www.youtube.com/watch?v=abc"


# =============================================================================
# Parsing
# =============================================================================


class TestParseArguments:
    """Tests for parse_arguments."""

    def test_forced_mp4_format_is_dropped(self):
        parsed = parse_arguments(["-f", "mp4", URL])
        assert parsed.passthrough == [URL]
        assert parsed.stripped_forced_formats == 1

    def test_long_format_flag_is_dropped(self):
        parsed = parse_arguments(["--format", "mp4", URL])
        assert parsed.passthrough == [URL]

    def test_other_format_is_kept(self):
        parsed = parse_arguments(["-f", "best", URL])
        assert parsed.passthrough == ["-f", "best", URL]

    def test_mp4_format_match_is_exact(self):
        """Only the literal value mp4 is stripped."""
        parsed = parse_arguments(["-f", "MP4", URL])
        assert parsed.passthrough == ["-f", "MP4", URL]

    def test_output_option_is_lifted(self):
        parsed = parse_arguments(["--no-playlist", "-o", "out.mp4", URL])
        assert parsed.passthrough == ["--no-playlist", URL]
        assert parsed.output is not None
        assert parsed.output.flag == "-o"
        assert parsed.output.value == "out.mp4"
        assert parsed.output.position == 1

    def test_trailing_flag_without_value(self):
        """A flag at the end of the list has no value and passes through."""
        parsed = parse_arguments([URL, "-o"])
        assert parsed.passthrough == [URL, "-o"]
        assert parsed.output is None

    def test_ffmpeg_location_value_is_not_parsed(self):
        """A location that looks like a flag stays paired with its option."""
        parsed = parse_arguments(["--ffmpeg-location", "-o", URL])
        assert parsed.passthrough == ["--ffmpeg-location", "-o", URL]
        assert parsed.output is None

    def test_ffmpeg_location_is_kept(self):
        parsed = parse_arguments(["--ffmpeg-location", "/opt/ff", URL])
        assert parsed.passthrough == ["--ffmpeg-location", "/opt/ff", URL]

    def test_render_restores_order(self):
        args = ["--no-playlist", "-o", "out.mp4", "--retries", "3", URL]
        assert parse_arguments(args).render() == args


# =============================================================================
# Output template adjustment
# =============================================================================


class TestWithExtensionTemplate:
    """Tests for with_extension_template."""

    def test_mp4_extension_is_replaced(self):
        assert with_extension_template("C:/dl/video.mp4") == "C:/dl/video.%(ext)s"

    def test_mp4_extension_case_insensitive(self):
        assert with_extension_template("clip.MP4") == "clip.%(ext)s"

    def test_mp4_is_stripped_exactly_once(self):
        assert with_extension_template("clip.mp4.mp4") == "clip.mp4.%(ext)s"

    def test_other_extension_is_kept(self):
        assert with_extension_template("clip.mkv") == "clip.mkv.%(ext)s"

    def test_no_extension(self):
        assert with_extension_template("clip") == "clip.%(ext)s"

    @pytest.mark.parametrize(
        "value", ["%(title)s.%(ext)s", "video.%(ext)s", "%(id)s.mp4"]
    )
    def test_templated_value_unchanged(self, value):
        assert with_extension_template(value) == value

    def test_directory_value_unchanged(self):
        assert with_extension_template("downloads/") == "downloads/"


# =============================================================================
# Rewriting
# =============================================================================


class TestRewriteArguments:
    """Tests for rewrite_arguments."""

    def test_basic_rewrite(self):
        result = rewrite_arguments(["-f", "mp4", "-o", "video.mp4", URL], EXPR)
        assert result == ["-o", "video.%(ext)s", URL, *TAIL]

    def test_ffmpeg_location_is_appended(self):
        result = rewrite_arguments([URL], EXPR, "C:/ffmpeg/bin")
        assert result == [
            URL,
            "-f",
            EXPR,
            "--ffmpeg-location",
            "C:/ffmpeg/bin",
            "--merge-output-format",
            "mp4",
            "--no-keep-video",
        ]

    def test_no_output_flag(self):
        assert rewrite_arguments([URL], EXPR) == [URL, *TAIL]

    def test_long_output_flag(self):
        result = rewrite_arguments(["--output", "a.mp4", URL], EXPR)
        assert result[:2] == ["--output", "a.%(ext)s"]

    def test_templated_output_unchanged(self):
        result = rewrite_arguments(["-o", "%(title)s.%(ext)s", URL], EXPR)
        assert result[:2] == ["-o", "%(title)s.%(ext)s"]

    def test_caller_format_is_kept_before_computed(self):
        result = rewrite_arguments(["-f", "best", URL], EXPR)
        assert result == ["-f", "best", URL, *TAIL]

    def test_output_keeps_position_among_options(self):
        result = rewrite_arguments(
            ["--no-playlist", "-o", "v.mp4", "--retries", "3", URL], EXPR
        )
        assert result[:6] == [
            "--no-playlist",
            "-o",
            "v.%(ext)s",
            "--retries",
            "3",
            URL,
        ]

    def test_does_not_mutate_input(self):
        args = ["-f", "mp4", "-o", "video.mp4", URL]
        rewrite_arguments(args, EXPR)
        assert args == ["-f", "mp4", "-o", "video.mp4", URL]

    def test_rewriting_twice_adds_second_format(self):
        """Rewriting is not idempotent: the computed -f is not stripped."""
        once = rewrite_arguments(["-o", "video.mp4", URL], EXPR)
        twice = rewrite_arguments(once, EXPR)

        assert once.count("-f") == 1
        assert twice.count("-f") == 2
        assert twice[:2] == ["-o", "video.%(ext)s"]


# =============================================================================
# Output path resolution
# =============================================================================


class TestResolveOutputPath:
    """Tests for resolve_output_path."""

    def test_relative_path_against_cwd(self, tmp_path: Path):
        result = resolve_output_path(["-o", "video.%(ext)s", URL], cwd=tmp_path)
        assert result == tmp_path / "video.mp4"

    def test_absolute_path(self, tmp_path: Path):
        value = str(tmp_path / "clip.%(ext)s")
        result = resolve_output_path(["-o", value, URL], cwd=Path("/elsewhere"))
        assert result == tmp_path / "clip.mp4"

    def test_plain_path_without_template(self, tmp_path: Path):
        result = resolve_output_path(["-o", "video.mp4"], cwd=tmp_path)
        assert result == tmp_path / "video.mp4"

    def test_no_output_flag(self, tmp_path: Path):
        assert resolve_output_path([URL, *TAIL], cwd=tmp_path) is None

    def test_other_template_tokens(self, tmp_path: Path):
        args = ["-o", "%(title)s.%(ext)s", URL]
        assert resolve_output_path(args, cwd=tmp_path) is None

    def test_directory_value(self, tmp_path: Path):
        assert resolve_output_path(["-o", "downloads/"], cwd=tmp_path) is None

    def test_existing_directory(self, tmp_path: Path):
        (tmp_path / "video.mp4").mkdir()
        assert resolve_output_path(["-o", "video.%(ext)s"], cwd=tmp_path) is None

    def test_first_output_flag_wins(self, tmp_path: Path):
        args = ["-o", "first.%(ext)s", "-o", "second.%(ext)s"]
        assert resolve_output_path(args, cwd=tmp_path) == tmp_path / "first.mp4"
