"""Unit tests for ffprobe codec inspection."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from ytguard.exceptions import InspectionError
from ytguard.introspector.ffprobe import build_probe_command, probe_video_codec

FFPROBE = Path("/opt/ffmpeg/ffprobe")


class TestBuildProbeCommand:
    """Tests for build_probe_command."""

    def test_command(self, tmp_path: Path):
        video = tmp_path / "video.mp4"
        assert build_probe_command(FFPROBE, video) == [
            str(FFPROBE),
            "-v",
            "error",
            "-select_streams",
            "v:0",
            "-show_entries",
            "stream=codec_name",
            "-of",
            "default=nw=1:nk=1",
            str(video),
        ]


class TestProbeVideoCodec:
    """Tests for probe_video_codec."""

    def test_returns_trimmed_codec(self, tmp_path: Path):
        with patch(
            "ytguard.introspector.ffprobe.run_command",
            return_value=("h264\r\n", "", 0),
        ):
            assert probe_video_codec(FFPROBE, tmp_path / "v.mp4") == "h264"

    def test_merges_stderr_into_stdout(self, tmp_path: Path):
        with patch(
            "ytguard.introspector.ffprobe.run_command", return_value=("vp9\n", "", 0)
        ) as mock_run:
            probe_video_codec(FFPROBE, tmp_path / "v.mp4")

        kwargs = mock_run.call_args.kwargs
        assert kwargs["stdout"] == subprocess.PIPE
        assert kwargs["stderr"] == subprocess.STDOUT

    def test_non_zero_exit_raises_with_output(self, tmp_path: Path):
        output = "v.mp4: Invalid data found when processing input\n"
        with patch(
            "ytguard.introspector.ffprobe.run_command", return_value=(output, "", 1)
        ):
            with pytest.raises(InspectionError) as exc_info:
                probe_video_codec(FFPROBE, tmp_path / "v.mp4")

        assert exc_info.value.output == output
        assert "Invalid data" in str(exc_info.value)

    def test_start_failure_raises(self, tmp_path: Path):
        with patch(
            "ytguard.introspector.ffprobe.run_command",
            side_effect=FileNotFoundError("ffprobe"),
        ):
            with pytest.raises(InspectionError):
                probe_video_codec(FFPROBE, tmp_path / "v.mp4")

    def test_no_video_stream_returns_empty(self, tmp_path: Path):
        with patch(
            "ytguard.introspector.ffprobe.run_command", return_value=("", "", 0)
        ):
            assert probe_video_codec(FFPROBE, tmp_path / "audio.m4a") == ""
