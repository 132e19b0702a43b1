"""RGBA textures and images held in memory, with pixel access and resizing."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike

from PIL import Image as _PILImage

from raycube.errors import ErrorCode, MlxError

BPP = 4
INT16_MAX = 32767

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _check_dimensions(width: int, height: int) -> None:
    if not width or not height or width > INT16_MAX or height > INT16_MAX or width < 0 or height < 0:
        raise MlxError(ErrorCode.INVDIM, f"{width}x{height}")


def encode_pixel(color: int) -> bytes:
    """Return the four RGBA bytes for a 0xRRGGBBAA colour."""
    return (color & 0xFFFFFFFF).to_bytes(4, "big")


@dataclass
class Texture:
    """A decoded RGBA picture."""

    width: int
    height: int
    pixels: bytearray
    bytes_per_pixel: int = BPP

    def __post_init__(self) -> None:
        self.pixels = bytearray(self.pixels)
        expected = self.width * self.height * self.bytes_per_pixel
        if len(self.pixels) != expected:
            raise ValueError(f"texture needs {expected} bytes, got {len(self.pixels)}")


@dataclass
class Instance:
    """One placement of an image in the window."""

    x: int
    y: int
    z: int
    enabled: bool = True


@dataclass(eq=False)
class Image:
    """A mutable RGBA pixel buffer that can be placed several times."""

    width: int
    height: int
    pixels: bytearray = field(init=False, repr=False)
    instances: list[Instance] = field(init=False, default_factory=list)
    enabled: bool = field(init=False, default=True)

    def __post_init__(self) -> None:
        _check_dimensions(self.width, self.height)
        self.pixels = bytearray(self.width * self.height * BPP)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MlxError(ErrorCode.INVPOS, f"({x}, {y})")
        return (y * self.width + x) * BPP

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Write a 0xRRGGBBAA colour at (x, y)."""
        start = self._offset(x, y)
        self.pixels[start:start + BPP] = encode_pixel(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Read the 0xRRGGBBAA colour at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self.pixels[start:start + BPP], "big")

    def resize(self, width: int, height: int) -> None:
        """Scale the image to a new size using nearest-neighbour sampling."""
        _check_dimensions(width, height)
        if width == self.width and height == self.height:
            return
        wstep = _f32(self.width / width)
        hstep = _f32(self.height / height)
        columns = [int(_f32(i * wstep)) for i in range(width)]
        source = self.pixels
        rows = []
        for j in range(height):
            base = int(_f32(j * hstep)) * self.width
            rows.append(
                b"".join(
                    source[(base + c) * BPP:(base + c + 1) * BPP] for c in columns
                )
            )
        self.pixels = bytearray(b"".join(rows))
        self.width = width
        self.height = height

    def add_instance(self, x: int, y: int, z: int) -> int:
        """Record a new placement and return its index."""
        self.instances.append(Instance(x, y, z))
        return len(self.instances) - 1


def texture_to_image(texture: Texture) -> Image:
    """Create an image holding a copy of a texture's pixels."""
    image = Image(texture.width, texture.height)
    row = texture.width * texture.bytes_per_pixel
    image.pixels[: row * texture.height] = texture.pixels[: row * texture.height]
    return image


def load_png(path: str | PathLike[str]) -> Texture:
    """Decode a PNG file into an RGBA texture."""
    try:
        with _PILImage.open(path) as picture:
            if picture.format != "PNG":
                raise MlxError(ErrorCode.INVPNG, f"not a PNG file: {path}")
            rgba = picture.convert("RGBA")
            width, height = rgba.size
            data = rgba.tobytes()
    except (OSError, ValueError) as exc:
        raise MlxError(ErrorCode.INVPNG, str(exc)) from exc
    return Texture(width, height, bytearray(data))


def fnv_hash(data: bytes | str) -> int:
    """Return the 64-bit FNV-1a hash of the given bytes."""
    if isinstance(data, str):
        data = data.encode()
    value = _FNV_OFFSET
    for byte in data:
        signed = byte - 256 if byte >= 128 else byte
        value ^= signed & _MASK64
        value = (value * _FNV_PRIME) & _MASK64
    return value


def rgba_to_mono(color: int) -> int:
    """Convert a 0xRRGGBBAA colour to grey, keeping its alpha."""
    red = int(_f32(_f32(0.299) * ((color >> 24) & 0xFF)))
    green = int(_f32(_f32(0.587) * ((color >> 16) & 0xFF)))
    blue = int(_f32(_f32(0.114) * ((color >> 8) & 0xFF)))
    grey = (red + green + blue) & 0xFF
    return (grey << 24 | grey << 16 | grey << 8 | (color & 0xFF)) & 0xFFFFFFFF