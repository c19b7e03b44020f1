"""Tests for little-endian scalar and fixed-point readers."""
import struct
import unittest

from cdxdecode import primitives as prim
from cdxdecode.entities import Point2D, Point3D, Rectangle
from cdxdecode.errors import SizeMismatchError


def fixed(value: float) -> bytes:
    return struct.pack("<i", int(value * 65536))


class ScalarCodecTest(unittest.TestCase):
    """Fixed-width integers decode and re-encode byte for byte."""

    def test_integer_round_trip(self) -> None:
        samples = {
            "uint8": b"\xfe",
            "int8": b"\x80",
            "uint16": b"\x34\x12",
            "int16": b"\xff\xff",
            "uint32": b"\x01\x00\x00\x80",
            "int32": b"\x00\x00\x01\x00",
            "uint64": b"\x01\x02\x03\x04\x05\x06\x07\x08",
            "int64": b"\xff\xff\xff\xff\xff\xff\xff\xff",
        }
        for kind, raw in samples.items():
            with self.subTest(kind=kind):
                value = prim.read_scalar(kind, raw)
                self.assertEqual(prim.encode_scalar(kind, value), raw)

    def test_signedness(self) -> None:
        self.assertEqual(prim.read_int16(b"\xff\xff"), -1)
        self.assertEqual(prim.read_uint16(b"\xff\xff"), 0xFFFF)
        self.assertEqual(prim.read_int8(b"\x80"), -128)

    def test_read_past_end_fails(self) -> None:
        with self.assertRaises(SizeMismatchError) as ctx:
            prim.read_uint32(b"\x00\x00\x00", 0, position=0x7B)
        self.assertIn("at 123(0x7b)", str(ctx.exception))
        self.assertEqual(ctx.exception.position, 123)

    def test_negative_offset_fails(self) -> None:
        with self.assertRaises(SizeMismatchError):
            prim.read_uint8(b"\x01", -1)


class CoordinateTest(unittest.TestCase):
    """Fixed-point coordinates and the stored field order of points and rectangles."""

    def test_coordinate_scale(self) -> None:
        self.assertEqual(prim.read_coordinate(fixed(1.5)), 1.5)
        self.assertEqual(prim.read_coordinate(fixed(-2.25)), -2.25)
        self.assertEqual(prim.encode_coordinate(-2.25), fixed(-2.25))

    def test_point2d_is_stored_y_first(self) -> None:
        point = prim.read_point2d(fixed(1.0) + fixed(2.0))
        self.assertEqual(point, Point2D(x=2.0, y=1.0))
        self.assertEqual(prim.encode_point2d(point), fixed(1.0) + fixed(2.0))

    def test_point3d_descending_and_ascending(self) -> None:
        raw = fixed(1.0) + fixed(2.0) + fixed(3.0)
        self.assertEqual(prim.read_point3d(raw), Point3D(x=3.0, y=2.0, z=1.0))
        self.assertEqual(prim.read_point3d(raw, ascending=True), Point3D(x=1.0, y=2.0, z=3.0))
        self.assertEqual(prim.encode_point3d(Point3D(3.0, 2.0, 1.0)), raw)

    def test_rectangle_field_order(self) -> None:
        raw = fixed(0) + fixed(0) + fixed(10) + fixed(20)
        rect = prim.read_rectangle(raw)
        self.assertEqual(rect, Rectangle(left=0.0, top=0.0, right=20.0, bottom=10.0))
        self.assertEqual(rect.width, 20.0)
        self.assertEqual(rect.height, 10.0)
        self.assertEqual(prim.encode_rectangle(rect), raw)


class CountedArrayTest(unittest.TestCase):
    """Count-prefixed arrays verify the count against the payload length."""

    def test_count_matches(self) -> None:
        raw = struct.pack("<H", 2) + fixed(1) + fixed(2) + fixed(3) + fixed(4)
        self.assertEqual(prim.read_count(raw, 8), 2)
        points = prim.read_point2d_array(raw, 2, 2)
        self.assertEqual(points, [Point2D(x=2.0, y=1.0), Point2D(x=4.0, y=3.0)])

    def test_count_mismatch(self) -> None:
        raw = struct.pack("<H", 3) + fixed(1) + fixed(2) + fixed(3) + fixed(4)
        with self.assertRaises(SizeMismatchError):
            prim.read_count(raw, 8)

    def test_empty_arrays(self) -> None:
        self.assertEqual(prim.int16_array(b"").tolist(), [])
        self.assertEqual(prim.read_point3d_array(b"\x00\x00", 2, 0), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
