"""Tests for domain value objects."""

import pytest

from spoticlient.domain.value_objects import code_image_url, hex_to_rgb


class TestHexToRgb:
    """Test hex color parsing."""

    @pytest.mark.parametrize(
        ("color", "expected"),
        [
            ("1DB954", (29, 185, 84)),
            ("#1db954", (29, 185, 84)),
            ("fff", (255, 255, 255)),
            ("#000000", (0, 0, 0)),
        ],
    )
    def test_valid(self, color: str, expected: tuple[int, int, int]) -> None:
        assert hex_to_rgb(color) == expected

    @pytest.mark.parametrize("color", ["", "12345", "zzzzzz", "#1db95412"])
    def test_invalid(self, color: str) -> None:
        with pytest.raises(ValueError):
            hex_to_rgb(color)


class TestCodeImageUrl:
    """Test Spotify code image URLs."""

    def test_default_color_uses_white_bars(self) -> None:
        assert code_image_url("spotify:artist:a1") == (
            "https://scannables.scdn.co/uri/plain/jpeg/1DB954/white/1080/spotify:artist:a1"
        )

    def test_light_background_uses_black_bars(self) -> None:
        assert code_image_url("spotify:track:t1", "#FF0000") == (
            "https://scannables.scdn.co/uri/plain/jpeg/FF0000/black/1080/spotify:track:t1"
        )

    def test_red_threshold_is_exclusive(self) -> None:
        # 0x96 == 150
        assert "/white/" in code_image_url("spotify:track:t1", "96FFFF")
        assert "/black/" in code_image_url("spotify:track:t1", "97FFFF")
