"""Reader for the XPM42 text image format."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from raycube.errors import ErrorCode, MlxError
from raycube.image import BPP, INT16_MAX, Texture, encode_pixel, fnv_hash, rgba_to_mono

_TABLE_SIZE = 65535
_MAGIC = b"!XPM42"
_MAX_CPP = 10

_INT = re.compile(rb"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_CHAR = re.compile(rb"\s*(\S)")
_HEX = re.compile(rb"\s*([+-]?)([0-9a-fA-F]*)")


@dataclass
class Xpm:
    """A decoded XPM42 picture and its header information."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str


def _invalid(detail: str) -> MlxError:
    return MlxError(ErrorCode.INVXPM, detail)


def _as_bytes(line: str | bytes) -> bytes:
    return line.encode("utf-8") if isinstance(line, str) else bytes(line)


def _parse_int(sign: bytes, digits: bytes) -> int:
    if digits[:2].lower() == b"0x":
        value = int(digits[2:], 16)
    elif digits.startswith(b"0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == b"-" else value


def _parse_header(line: bytes) -> tuple[int, int, int, int, str]:
    position = 0
    values = []
    for _ in range(4):
        match = _INT.match(line, position)
        if match is None:
            raise _invalid("malformed header")
        values.append(_parse_int(*match.groups()))
        position = match.end()
    mode_match = _CHAR.match(line, position)
    if mode_match is None:
        raise _invalid("missing colour mode")
    width, height, color_count, cpp = values
    mode = mode_match.group(1).decode("latin-1")
    if not 0 <= width <= INT16_MAX or not 0 <= height <= INT16_MAX:
        raise _invalid("dimensions out of range")
    if mode not in ("c", "m"):
        raise _invalid(f"unknown colour mode {mode!r}")
    if not 0 <= cpp <= _MAX_CPP:
        raise _invalid("characters per pixel out of range")
    return width, height, color_count, cpp, mode


def _hex_channel(chunk: bytes) -> int:
    match = _HEX.match(chunk)
    sign, digits = match.groups()
    value = int(digits, 16) if digits else 0
    if sign == b"-":
        value = -value
    return value & 0xFF


def _parse_entry(line: bytes, cpp: int, mode: str) -> tuple[int, int]:
    if line.rfind(b" ") != cpp:
        raise _invalid("colour key has the wrong length")
    if line[cpp + 1:cpp + 2] != b"#" or not line[cpp + 2:cpp + 3].isalnum():
        raise _invalid("malformed colour entry")
    start = cpp + 2
    color = 0
    for shift, offset in zip((24, 16, 8, 0), range(start, start + 8, 2)):
        color |= _hex_channel(line[offset:offset + 2]) << shift
    if mode == "m":
        color = rgba_to_mono(color)
    return fnv_hash(line[:cpp]) % _TABLE_SIZE, color


def _strip_newline(line: bytes) -> bytes:
    return line[:-1] if line.endswith(b"\n") else line


def _next_line(lines: Iterator[bytes], what: str) -> bytes:
    line = next(lines, None)
    if line is None:
        raise _invalid(f"unexpected end of data while reading {what}")
    return line


def parse_xpm42(lines: Iterable[str | bytes]) -> Xpm:
    """Decode XPM42 content given as lines of text or bytes.

    Raises MlxError with INVXPM if the content is malformed.
    """
    stream = (_as_bytes(line) for line in lines)
    if _strip_newline(_next_line(stream, "the magic line")) != _MAGIC:
        raise _invalid("missing !XPM42 marker")
    width, height, color_count, cpp, mode = _parse_header(
        _next_line(stream, "the header")
    )

    table: dict[int, int] = {}
    for _ in range(color_count):
        index, color = _parse_entry(_next_line(stream, "the colour table"), cpp, mode)
        table[index] = color

    pixels = bytearray()
    for _ in range(height):
        row = _strip_newline(_next_line(stream, "pixel data"))
        if len(row) != width * cpp:
            raise _invalid("pixel row has the wrong length")
        for start in range(0, width * cpp, cpp) if cpp else (0 for _ in range(width)):
            key = fnv_hash(row[start:start + cpp]) % _TABLE_SIZE
            pixels += encode_pixel(table.get(key, 0))

    texture = Texture(width, height, pixels, BPP)
    return Xpm(texture=texture, color_count=color_count, cpp=cpp, mode=mode)


def load_xpm42(path: str | PathLike[str]) -> Xpm:
    """Read an .xpm42 file.

    Raises MlxError with INVEXT for a wrong extension, INVFILE if the file
    cannot be opened and INVXPM if its content is malformed.
    """
    if ".xpm42" not in str(path):
        raise MlxError(ErrorCode.INVEXT, str(path))
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise MlxError(ErrorCode.INVFILE, str(exc)) from exc
    with handle:
        return parse_xpm42(handle)