"""Tests for ordered value/token tables."""
import unittest

from cdxdecode import enums
from cdxdecode.charsets import CharSet
from cdxdecode.enums import (
    BOND_DOUBLE_POSITION_TOKENS,
    BOND_ORDER_CODES,
    NODE_TYPE_TOKENS,
    BondDoublePosition,
    BondOrder,
    CodeTable,
    EnumTable,
    Justification,
    NodeType,
)
from cdxdecode.errors import EnumLookupError, SizeMismatchError, UnknownTokenError, UnknownValueError
from cdxdecode.logging import WarningKind
from cdxdecode.properties import PropertyDecoder
from cdxdecode.refs import ResolutionMode
from cdxdecode.tree import Property

TOKEN_TABLES = [
    enums.JUSTIFICATION_TOKENS,
    enums.DRAWING_SPACE_TOKENS,
    enums.NODE_TYPE_TOKENS,
    enums.BOND_ORDER_TOKENS,
    enums.BOND_DISPLAY_TOKENS,
    enums.BOND_DOUBLE_POSITION_TOKENS,
    enums.LABEL_DISPLAY_TOKENS,
    enums.RADICAL_TOKENS,
    enums.BOND_CIP_TOKENS,
    enums.CHARSET_TOKEN_TABLE,
]


class EnumTableTest(unittest.TestCase):
    def test_round_trip_for_first_mapped_values(self) -> None:
        for table in TOKEN_TABLES:
            seen = set()
            for value, token in table:
                if token is None or token in seen:
                    continue
                seen.add(token)
                with self.subTest(table=table.name, value=value):
                    self.assertEqual(table.to_value(table.to_token(value)), value)

    def test_duplicate_tokens_resolve_to_first_entry(self) -> None:
        table = BOND_DOUBLE_POSITION_TOKENS
        self.assertEqual(table.to_token(BondDoublePosition.USER_CENTER), "Center")
        self.assertEqual(table.to_value("Center"), BondDoublePosition.AUTO_CENTER)
        self.assertEqual(table.to_value("Right"), BondDoublePosition.AUTO_RIGHT)

    def test_missing_entries_fail(self) -> None:
        with self.assertRaises(UnknownTokenError):
            enums.JUSTIFICATION_TOKENS.to_value("Sideways")
        with self.assertRaises(UnknownValueError):
            enums.JUSTIFICATION_TOKENS.to_token(NodeType.ELEMENT)

    def test_token_lookup_is_exact(self) -> None:
        with self.assertRaises(EnumLookupError):
            enums.DRAWING_SPACE_TOKENS.to_value("Pages")

    def test_link_node_has_no_token(self) -> None:
        with self.assertRaises(UnknownValueError):
            NODE_TYPE_TOKENS.to_token(NodeType.LINK_NODE)
        with self.assertRaises(UnknownTokenError):
            NODE_TYPE_TOKENS.to_value("LinkNode")

    def test_order_decides_between_duplicate_values(self) -> None:
        table = EnumTable("Sample", [(1, "one"), (1, "uno"), (2, "two")])
        self.assertEqual(table.to_token(1), "one")
        self.assertEqual(table.to_value("uno"), 1)
        self.assertEqual(len(table), 3)

    def test_charset_tokens(self) -> None:
        self.assertEqual(enums.CHARSET_TOKEN_TABLE.to_token(CharSet.WIN31_LATIN1), "iso-8859-1")
        self.assertEqual(enums.CHARSET_TOKEN_TABLE.to_value("x-mac-ce"), CharSet.MAC_CENTRAL_EURO_ROMAN)


class CodeTableTest(unittest.TestCase):
    def setUp(self) -> None:
        self.decoder = PropertyDecoder()

    def test_binary_codes(self) -> None:
        self.assertEqual(BOND_ORDER_CODES.member_for(0x0080), BondOrder.ONE_HALF)
        self.assertEqual(BOND_ORDER_CODES.code_for(BondOrder.ANY), 0xFFFF)
        with self.assertRaises(UnknownValueError):
            BOND_ORDER_CODES.member_for(0x0005)

    def test_as_enum_reads_declared_width(self) -> None:
        prop = Property(0x0600, b"\x80\x00")
        self.assertEqual(self.decoder.as_enum(prop, BOND_ORDER_CODES), BondOrder.ONE_HALF)
        justify = Property(0x0701, b"\xff")
        self.assertEqual(self.decoder.as_enum(justify, enums.JUSTIFICATION_CODES), Justification.RIGHT)
        with self.assertRaises(SizeMismatchError):
            self.decoder.as_enum(Property(0x0701, b"\xff\xff"), enums.JUSTIFICATION_CODES)

    def test_generic_width_codes(self) -> None:
        for payload in (b"\x06", b"\x06\x00", b"\x06\x00\x00\x00"):
            with self.subTest(width=len(payload)):
                self.assertEqual(
                    self.decoder.as_enum(Property(0x0601, payload), enums.BOND_DISPLAY_CODES),
                    enums.BondDisplay.WEDGE_BEGIN,
                )

    def test_unrecognized_code(self) -> None:
        prop = Property(0x0600, b"\x05\x00", position=0x44)
        with self.assertRaises(UnknownValueError):
            self.decoder.as_enum(prop, BOND_ORDER_CODES)
        value = self.decoder.as_enum(prop, BOND_ORDER_CODES, ResolutionMode.LENIENT, BondOrder.SINGLE)
        self.assertEqual(value, BondOrder.SINGLE)
        self.assertEqual(self.decoder.log.kinds(), [WarningKind.UNRECOGNIZED_VALUE])

    def test_every_code_is_distinct(self) -> None:
        for name in dir(enums):
            table = getattr(enums, name)
            if isinstance(table, CodeTable):
                codes = [code for _, code in table.entries]
                with self.subTest(table=table.name):
                    self.assertEqual(len(codes), len(set(codes)))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
