"""Value objects shared by the domain entities."""

from dataclasses import dataclass
SCANNABLES_URL = "https://scannables.scdn.co/uri/plain/jpeg"


@dataclass(frozen=True)
class Image:
    """One entry of a Spotify ``images`` array.

    Spotify omits width/height for user uploaded images, so both are optional.
    """

    url: str
    height: int | None = None
    width: int | None = None


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Convert a hex color code (``1DB954``, ``#1db954`` or ``fff``) to an RGB tuple.

    Raises:
        ValueError: If the value is not a 3 or 6 digit hex code
    """
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {color!r}")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


# Hey future me - bar color flips to black on light backgrounds. Spotify's own generator only
# looks at the red channel, so do we. The color goes into the URL WITHOUT the leading '#'.
def code_image_url(uri: str, color: str = "1DB954") -> str:
    """Build the URL of a Spotify scannable code image for ``uri``.

    Args:
        uri: Spotify URI (e.g. ``spotify:artist:0OdUWJ0sBjDrqHygGUXeCF``)
        color: Background hex color

    Returns:
        URL of a 1080px JPEG code image
    """
    background = color.lstrip("#")
    bars = "black" if hex_to_rgb(background)[0] > 150 else "white"
    return f"{SCANNABLES_URL}/{background}/{bars}/1080/{uri}"


__all__ = ["SCANNABLES_URL", "Image", "code_image_url", "hex_to_rgb"]
