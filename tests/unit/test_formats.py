"""Unit tests for yt-dlp format selection."""

import pytest

from ytguard.domain.enums import Resolution
from ytguard.policy.formats import select_format


class TestSelectFormat:
    """Tests for select_format."""

    @pytest.mark.parametrize(
        "resolution,expected",
        [
            (
                Resolution.P480,
                "bestvideo[height<=480]+bestaudio/best[height<=480]",
            ),
            (
                Resolution.P720,
                "bestvideo[height<=720]+bestaudio/best[height<=720]",
            ),
            (
                Resolution.P1080,
                "bestvideo[height<=1080]+bestaudio/best[height<=1080]",
            ),
            (
                Resolution.UHD_4K,
                "bestvideo[height<=2160]+bestaudio/best[height<=2160]",
            ),
            (Resolution.UNRESTRICTED, "bestvideo+bestaudio/best"),
        ],
    )
    def test_best_quality_mode(self, resolution, expected):
        """Best-quality mode only filters on height."""
        assert select_format(resolution, False) == expected

    @pytest.mark.parametrize(
        ("resolution", "height"),
        [
            (Resolution.P480, 480),
            (Resolution.P720, 720),
            (Resolution.P1080, 1080),
            (Resolution.UHD_4K, 2160),
        ],
    )
    def test_compatibility_mode_with_height(self, resolution, height):
        """Compatibility mode pins the avc1 family before the height filter."""
        assert select_format(resolution, True) == (
            f"bestvideo[vcodec^=avc1][height<={height}]+bestaudio"
            f"/best[vcodec^=avc1][height<={height}]"
        )

    def test_compatibility_mode_unrestricted(self):
        """Compatibility mode without a height ceiling keeps the codec filter."""
        assert select_format(Resolution.UNRESTRICTED, True) == (
            "bestvideo[vcodec^=avc1]+bestaudio/best[vcodec^=avc1]"
        )

    def test_accepts_raw_string(self):
        """Raw config strings are parsed case-insensitively."""
        assert select_format("1080P", False) == (
            "bestvideo[height<=1080]+bestaudio/best[height<=1080]"
        )

    def test_unknown_string_is_unrestricted(self):
        """Unrecognized resolutions fall back to no ceiling."""
        assert select_format("8k", False) == "bestvideo+bestaudio/best"

    def test_unknown_string_in_compatibility_mode(self):
        """An unrecognized resolution still keeps the avc1 filter."""
        assert select_format("8k", True) == (
            "bestvideo[vcodec^=avc1]+bestaudio/best[vcodec^=avc1]"
        )

    def test_4k_uppercase(self):
        """4K is accepted in any case."""
        assert "[height<=2160]" in select_format("4K", False)


class TestResolutionParse:
    """Tests for Resolution.parse."""

    def test_empty_value(self):
        assert Resolution.parse("") is Resolution.UNRESTRICTED
        assert Resolution.parse(None) is Resolution.UNRESTRICTED

    def test_whitespace_is_stripped(self):
        assert Resolution.parse(" 720p ") is Resolution.P720
