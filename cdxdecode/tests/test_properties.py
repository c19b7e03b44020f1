"""Tests for scalar, geometry and list property accessors."""
import datetime as dt
import struct
import unittest

from cdxdecode.entities import Point2D, Point3D, Rectangle
from cdxdecode.errors import PropertyValueError, SizeMismatchError
from cdxdecode.properties import PropertyDecoder
from cdxdecode.tree import Property


def fixed(value: float) -> bytes:
    return struct.pack("<i", int(value * 65536))


def prop(payload: bytes) -> Property:
    return Property(tag=0x0200, payload=payload, position=0x1C)


class ScalarAccessorTest(unittest.TestCase):
    def setUp(self) -> None:
        self.decoder = PropertyDecoder()

    def test_boolean(self) -> None:
        self.assertTrue(self.decoder.as_boolean(prop(b"")))
        self.assertTrue(self.decoder.as_boolean(prop(b"\x02")))
        self.assertFalse(self.decoder.as_boolean(prop(b"\x00")))
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_boolean(prop(b"\x00\x00"))

    def test_generic_widths(self) -> None:
        self.assertEqual(self.decoder.as_uint(prop(b"\xff")), 255)
        self.assertEqual(self.decoder.as_uint(prop(b"\xff\xff")), 0xFFFF)
        self.assertEqual(self.decoder.as_uint(prop(b"\xff\xff\xff\xff")), 0xFFFFFFFF)
        self.assertEqual(self.decoder.as_int(prop(b"\xff")), -1)
        self.assertEqual(self.decoder.as_int(prop(b"\xfe\xff")), -2)
        self.assertEqual(self.decoder.as_int(prop(b"\xfd\xff\xff\xff")), -3)
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_uint(prop(b"\x00\x00\x00"))

    def test_exact_widths(self) -> None:
        with self.assertRaises(SizeMismatchError) as ctx:
            self.decoder.as_int16(prop(b"\x01\x02\x03"))
        self.assertIn("at 28(0x1c)", str(ctx.exception))
        self.assertEqual(self.decoder.as_uint8(prop(b"\x07")), 7)
        self.assertEqual(self.decoder.as_int8(prop(b"\xf9")), -7)
        self.assertEqual(self.decoder.as_uint16(prop(b"\x01\x01")), 257)
        self.assertEqual(self.decoder.as_int32(prop(struct.pack("<i", -70000))), -70000)
        self.assertEqual(self.decoder.as_int64(prop(struct.pack("<q", 1 << 40))), 1 << 40)
        self.assertEqual(self.decoder.as_float64(prop(struct.pack("<d", 2.5))), 2.5)
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_float64(prop(b"\x00" * 4))

    def test_string(self) -> None:
        self.assertEqual(self.decoder.as_string(prop(b"Caf\xe9")), "Café")

    def test_line_height(self) -> None:
        self.assertTrue(self.decoder.as_line_height(prop(b"\x00\x00")).variable)
        self.assertTrue(self.decoder.as_line_height(prop(b"\x01\x00")).automatic)
        self.assertEqual(self.decoder.as_line_height(prop(struct.pack("<H", 280))).points, 14.0)

    def test_date(self) -> None:
        payload = struct.pack("<7h", 2019, 7, 14, 9, 30, 5, 0)
        self.assertEqual(self.decoder.as_date(prop(payload)), dt.datetime(2019, 7, 14, 9, 30, 5))
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_date(prop(payload[:12]))

    def test_unset_date(self) -> None:
        payload = struct.pack("<7h", 0, 0, 0, 0, 0, 0, 0)
        self.assertIsNone(self.decoder.as_date(prop(payload)))

    def test_invalid_date(self) -> None:
        payload = struct.pack("<7h", 2019, 13, 40, 0, 0, 0, 0)
        with self.assertRaises(PropertyValueError):
            self.decoder.as_date(prop(payload))

    def test_font_face(self) -> None:
        face = self.decoder.as_font_face(prop(b"\x60\x00"))
        self.assertTrue(face.formula)
        self.assertFalse(face.subscript or face.superscript)
        self.assertEqual(face.to_bits(), 0x60)
        face = self.decoder.as_font_face(prop(b"\x45\x00"))
        self.assertTrue(face.bold and face.underline and face.superscript)
        self.assertEqual(face.to_bits(), 0x45)


class ArrayAccessorTest(unittest.TestCase):
    def setUp(self) -> None:
        self.decoder = PropertyDecoder()

    def test_float64_array(self) -> None:
        payload = struct.pack("<3d", 1.0, -2.0, 0.5)
        self.assertEqual(self.decoder.as_float64_array(prop(payload)), [1.0, -2.0, 0.5])
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_float64_array(prop(payload[:-1]))

    def test_int16_arrays(self) -> None:
        self.assertEqual(self.decoder.as_int16_array(prop(struct.pack("<3h", 1, -1, 300))), [1, -1, 300])
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_int16_array(prop(b"\x00\x00\x00"))
        counted = struct.pack("<H2h", 2, 5, -6)
        self.assertEqual(self.decoder.as_int16_list_with_count(prop(counted)), [5, -6])
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_int16_list_with_count(prop(counted + b"\x00\x00"))

    def test_geometry(self) -> None:
        self.assertEqual(self.decoder.as_coordinate(prop(fixed(3.5))), 3.5)
        self.assertEqual(self.decoder.as_point2d(prop(fixed(1.0) + fixed(2.0))), Point2D(x=2.0, y=1.0))
        self.assertEqual(
            self.decoder.as_point3d(prop(fixed(1.0) + fixed(2.0) + fixed(3.0))),
            Point3D(x=3.0, y=2.0, z=1.0),
        )
        self.assertEqual(
            self.decoder.as_rectangle(prop(fixed(0) + fixed(0) + fixed(10) + fixed(20))),
            Rectangle(left=0.0, top=0.0, right=20.0, bottom=10.0),
        )
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_point2d(prop(fixed(1.0)))

    def test_point2d_array(self) -> None:
        payload = struct.pack("<H", 2) + fixed(1) + fixed(2) + fixed(3) + fixed(4)
        self.assertEqual(len(payload), 18)
        points = self.decoder.as_point2d_array(prop(payload))
        self.assertEqual(points, [Point2D(x=2.0, y=1.0), Point2D(x=4.0, y=3.0)])
        bad = struct.pack("<H", 3) + payload[2:]
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_point2d_array(prop(bad))

    def test_point3d_array(self) -> None:
        payload = struct.pack("<H", 1) + fixed(1) + fixed(2) + fixed(3)
        self.assertEqual(self.decoder.as_point3d_array(prop(payload)), [Point3D(x=3.0, y=2.0, z=1.0)])


class ListAccessorTest(unittest.TestCase):
    def setUp(self) -> None:
        self.decoder = PropertyDecoder()

    def test_element_list(self) -> None:
        inclusive = self.decoder.as_element_list(prop(struct.pack("<hHH", 2, 6, 7)))
        self.assertEqual(inclusive.elements, (6, 7))
        self.assertFalse(inclusive.exclusive)
        exclusive = self.decoder.as_element_list(prop(struct.pack("<hH", -1, 8)))
        self.assertEqual(exclusive.elements, (8,))
        self.assertTrue(exclusive.exclusive)
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_element_list(prop(b"\x01\x00\x06"))

    def test_generic_list(self) -> None:
        first = struct.pack("<H", 0) + b"Ph"
        second = struct.pack("<H", 0) + b"Me"
        payload = (
            struct.pack("<h", -2)
            + struct.pack("<H", len(first))
            + first
            + struct.pack("<H", len(second))
            + second
        )
        result = self.decoder.as_generic_list(prop(payload))
        self.assertEqual(result.elements, ("Ph", "Me"))
        self.assertTrue(result.exclusive)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
