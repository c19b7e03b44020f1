"""
Little-endian scalar, fixed-point and array readers for CDX property payloads.

Every reader takes the payload, an offset and the stream position of the
owning property; the position only feeds error messages.
"""

from __future__ import annotations

import struct
from typing import List, Tuple

import numpy as np

from .entities import Point2D, Point3D, Rectangle
from .errors import SizeMismatchError

FIXED_POINT_SCALE = 1.0 / 65536.0
COORDINATE_SIZE = 4
POINT2D_SIZE = 8
POINT3D_SIZE = 12
RECTANGLE_SIZE = 16
COUNT_SIZE = 2

INT_FORMATS: dict[str, str] = {
    "uint8": "<B",
    "int8": "<b",
    "uint16": "<H",
    "int16": "<h",
    "uint32": "<I",
    "int32": "<i",
    "uint64": "<Q",
    "int64": "<q",
    "float64": "<d",
}


def _unpack(fmt: str, data: bytes, offset: int, position: int | None) -> Tuple:
    size = struct.calcsize(fmt)
    if offset < 0 or offset + size > len(data):
        raise SizeMismatchError(
            f"read of {size} bytes at offset {offset} overruns payload of {len(data)} bytes",
            position,
        )
    return struct.unpack_from(fmt, data, offset)


def read_scalar(kind: str, data: bytes, offset: int = 0, position: int | None = None):
    return _unpack(INT_FORMATS[kind], data, offset, position)[0]


def read_uint8(data: bytes, offset: int = 0, position: int | None = None) -> int:
    return _unpack("<B", data, offset, position)[0]


def read_int8(data: bytes, offset: int = 0, position: int | None = None) -> int:
    return _unpack("<b", data, offset, position)[0]


def read_uint16(data: bytes, offset: int = 0, position: int | None = None) -> int:
    return _unpack("<H", data, offset, position)[0]


def read_int16(data: bytes, offset: int = 0, position: int | None = None) -> int:
    return _unpack("<h", data, offset, position)[0]


def read_uint32(data: bytes, offset: int = 0, position: int | None = None) -> int:
    return _unpack("<I", data, offset, position)[0]


def read_int32(data: bytes, offset: int = 0, position: int | None = None) -> int:
    return _unpack("<i", data, offset, position)[0]


def read_coordinate(data: bytes, offset: int = 0, position: int | None = None) -> float:
    return read_int32(data, offset, position) * FIXED_POINT_SCALE


def read_point2d(data: bytes, offset: int = 0, position: int | None = None) -> Point2D:
    # Stored Y first.
    y, x = _unpack("<ii", data, offset, position)
    return Point2D(x=x * FIXED_POINT_SCALE, y=y * FIXED_POINT_SCALE)


def read_point3d(
    data: bytes,
    offset: int = 0,
    position: int | None = None,
    *,
    ascending: bool = False,
) -> Point3D:
    a, b, c = _unpack("<iii", data, offset, position)
    if ascending:
        x, y, z = a, b, c
    else:
        z, y, x = a, b, c
    return Point3D(x=x * FIXED_POINT_SCALE, y=y * FIXED_POINT_SCALE, z=z * FIXED_POINT_SCALE)


def read_rectangle(data: bytes, offset: int = 0, position: int | None = None) -> Rectangle:
    top, left, bottom, right = _unpack("<iiii", data, offset, position)
    return Rectangle(
        left=left * FIXED_POINT_SCALE,
        top=top * FIXED_POINT_SCALE,
        right=right * FIXED_POINT_SCALE,
        bottom=bottom * FIXED_POINT_SCALE,
    )


def require_size(data: bytes, size: int, position: int | None = None) -> None:
    if len(data) != size:
        raise SizeMismatchError(
            f"property size doesn't match, current size: {len(data)} expected size: {size}",
            position,
        )


def require_multiple(data: bytes, stride: int, position: int | None = None) -> int:
    if len(data) % stride:
        raise SizeMismatchError(
            f"property size {len(data)} is not a multiple of {stride}",
            position,
        )
    return len(data) // stride


def read_count(data: bytes, element_size: int, position: int | None = None) -> int:
    """
    Read the leading uint16 element count and check it against the payload.
    """
    count = read_uint16(data, 0, position)
    if count * element_size + COUNT_SIZE != len(data):
        raise SizeMismatchError(
            f"unexpected count of entries {count} for length {len(data)}",
            position,
        )
    return count


def _frombuffer(data: bytes, dtype: str, offset: int, count: int) -> np.ndarray:
    if count == 0 or offset >= len(data):
        return np.empty(0, dtype=dtype)
    return np.frombuffer(data, dtype=dtype, count=count, offset=offset)


def int16_array(data: bytes, offset: int = 0, count: int = -1) -> np.ndarray:
    return _frombuffer(data, "<i2", offset, count)


def uint16_array(data: bytes, offset: int = 0, count: int = -1) -> np.ndarray:
    return _frombuffer(data, "<u2", offset, count)


def int32_array(data: bytes, offset: int = 0, count: int = -1) -> np.ndarray:
    return _frombuffer(data, "<i4", offset, count)


def float64_array(data: bytes, offset: int = 0, count: int = -1) -> np.ndarray:
    return _frombuffer(data, "<f8", offset, count)


def read_point2d_array(data: bytes, offset: int, count: int) -> List[Point2D]:
    raw = int32_array(data, offset, count * 2).reshape(-1, 2) * FIXED_POINT_SCALE
    return [Point2D(x=float(x), y=float(y)) for y, x in raw]


def read_point3d_array(data: bytes, offset: int, count: int) -> List[Point3D]:
    raw = int32_array(data, offset, count * 3).reshape(-1, 3) * FIXED_POINT_SCALE
    return [Point3D(x=float(x), y=float(y), z=float(z)) for z, y, x in raw]


def encode_scalar(kind: str, value) -> bytes:
    return struct.pack(INT_FORMATS[kind], value)


def encode_coordinate(value: float) -> bytes:
    return struct.pack("<i", int(round(value * 65536.0)))


def encode_point2d(point: Point2D) -> bytes:
    return encode_coordinate(point.y) + encode_coordinate(point.x)


def encode_point3d(point: Point3D, *, ascending: bool = False) -> bytes:
    ordered = (point.x, point.y, point.z) if ascending else (point.z, point.y, point.x)
    return b"".join(encode_coordinate(value) for value in ordered)


def encode_rectangle(rect: Rectangle) -> bytes:
    return b"".join(
        encode_coordinate(value) for value in (rect.top, rect.left, rect.bottom, rect.right)
    )


def scalar_size(kind: str) -> int:
    return struct.calcsize(INT_FORMATS[kind])
