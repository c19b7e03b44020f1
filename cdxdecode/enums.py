"""
Table-driven conversions between enumerated values and their CDXML tokens
or CDX binary codes.

Tables are ordered lists walked front to back, so when several values share
a token (the bond double positions) the first entry wins.
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterator, Sequence, Tuple, TypeVar

from .charsets import CHARSET_TOKENS, CharSet
from .errors import UnknownTokenError, UnknownValueError

V = TypeVar("V")


class EnumTable(Generic[V]):
    def __init__(self, name: str, entries: Sequence[Tuple[V, str | None]]) -> None:
        self.name = name
        self.entries: Tuple[Tuple[V, str | None], ...] = tuple(entries)

    def to_token(self, value: V, position: int | None = None) -> str:
        for entry_value, token in self.entries:
            if entry_value == value:
                if token is None:
                    raise UnknownValueError(self.name, value, position)
                return token
        raise UnknownValueError(self.name, value, position)

    def to_value(self, token: str, position: int | None = None) -> V:
        for entry_value, entry_token in self.entries:
            if entry_token is not None and entry_token == token:
                return entry_value
        raise UnknownTokenError(self.name, token, position)

    def __iter__(self) -> Iterator[Tuple[V, str | None]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class CodeTable(Generic[V]):
    """
    Binary codes for an enum; ``kind`` names the primitive the code is stored
    as (``"uint"`` accepts 1, 2 or 4 bytes).
    """

    def __init__(self, name: str, kind: str, entries: Sequence[Tuple[V, int]]) -> None:
        self.name = name
        self.kind = kind
        self.entries: Tuple[Tuple[V, int], ...] = tuple(entries)

    def member_for(self, code: int, position: int | None = None) -> V:
        for member, entry_code in self.entries:
            if entry_code == code:
                return member
        raise UnknownValueError(f"{self.name} code", code, position)

    def code_for(self, member: V, position: int | None = None) -> int:
        for entry_member, code in self.entries:
            if entry_member == member:
                return code
        raise UnknownValueError(self.name, member, position)


class Justification(Enum):
    RIGHT = "Right"
    LEFT = "Left"
    CENTER = "Center"
    FULL = "Full"
    ABOVE = "Above"
    BELOW = "Below"
    AUTO = "Auto"
    BEST_INITIAL = "BestInitial"


class DrawingSpaceType(Enum):
    PAGES = "Pages"
    POSTER = "Poster"


class NodeType(Enum):
    UNSPECIFIED = "Unspecified"
    ELEMENT = "Element"
    ELEMENT_LIST = "ElementList"
    ELEMENT_LIST_NICKNAME = "ElementListNickname"
    NICKNAME = "Nickname"
    FRAGMENT = "Fragment"
    FORMULA = "Formula"
    GENERIC_NICKNAME = "GenericNickname"
    ANONYMOUS_ALTERNATIVE_GROUP = "AnonymousAlternativeGroup"
    NAMED_ALTERNATIVE_GROUP = "NamedAlternativeGroup"
    MULTI_ATTACHMENT = "MultiAttachment"
    VARIABLE_ATTACHMENT = "VariableAttachment"
    EXTERNAL_CONNECTION_POINT = "ExternalConnectionPoint"
    LINK_NODE = "LinkNode"


class BondOrder(Enum):
    SINGLE = "Single"
    DOUBLE = "Double"
    TRIPLE = "Triple"
    QUADRUPLE = "Quadruple"
    QUINTUPLE = "Quintuple"
    SEXTUPLE = "Sextuple"
    HALF = "Half"
    ONE_HALF = "OneHalf"
    TWO_HALF = "TwoHalf"
    THREE_HALF = "ThreeHalf"
    FOUR_HALF = "FourHalf"
    FIVE_HALF = "FiveHalf"
    DATIVE = "Dative"
    IONIC = "Ionic"
    HYDROGEN = "Hydrogen"
    THREE_CENTER = "ThreeCenter"
    SINGLE_OR_DOUBLE = "SingleOrDouble"
    SINGLE_OR_AROMATIC = "SingleOrAromatic"
    DOUBLE_OR_AROMATIC = "DoubleOrAromatic"
    ANY = "Any"


class BondDisplay(Enum):
    SOLID = "Solid"
    DASH = "Dash"
    HASH = "Hash"
    WEDGED_HASH_BEGIN = "WedgedHashBegin"
    WEDGED_HASH_END = "WedgedHashEnd"
    BOLD = "Bold"
    WEDGE_BEGIN = "WedgeBegin"
    WEDGE_END = "WedgeEnd"
    WAVY = "Wavy"
    HOLLOW_WEDGE_BEGIN = "HollowWedgeBegin"
    HOLLOW_WEDGE_END = "HollowWedgeEnd"
    WAVY_WEDGE_BEGIN = "WavyWedgeBegin"
    WAVY_WEDGE_END = "WavyWedgeEnd"
    DOT = "Dot"
    DASH_DOT = "DashDot"


class BondDoublePosition(Enum):
    AUTO_CENTER = "AutoCenter"
    AUTO_RIGHT = "AutoRight"
    AUTO_LEFT = "AutoLeft"
    USER_CENTER = "UserCenter"
    USER_RIGHT = "UserRight"
    USER_LEFT = "UserLeft"


class LabelDisplay(Enum):
    AUTO = "Auto"
    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"
    ABOVE = "Above"
    BELOW = "Below"
    BEST_INITIAL = "BestInitial"


class Radical(Enum):
    NONE = "None"
    SINGLET = "Singlet"
    DOUBLET = "Doublet"
    TRIPLET = "Triplet"


class BondCIPType(Enum):
    UNDETERMINED = "Undetermined"
    NONE = "None"
    E = "E"
    Z = "Z"


JUSTIFICATION_TOKENS = EnumTable(
    "Justification",
    [
        (Justification.RIGHT, "Right"),
        (Justification.LEFT, "Left"),
        (Justification.CENTER, "Center"),
        (Justification.FULL, "Full"),
        (Justification.ABOVE, "Above"),
        (Justification.BELOW, "Below"),
        (Justification.AUTO, "Auto"),
        (Justification.BEST_INITIAL, "Best"),
    ],
)
JUSTIFICATION_CODES = CodeTable(
    "Justification",
    "int8",
    [
        (Justification.RIGHT, -1),
        (Justification.LEFT, 0),
        (Justification.CENTER, 1),
        (Justification.FULL, 2),
        (Justification.ABOVE, 3),
        (Justification.BELOW, 4),
        (Justification.AUTO, 5),
        (Justification.BEST_INITIAL, 6),
    ],
)

DRAWING_SPACE_TOKENS = EnumTable(
    "DrawingSpaceType",
    [(DrawingSpaceType.PAGES, "pages"), (DrawingSpaceType.POSTER, "poster")],
)
DRAWING_SPACE_CODES = CodeTable(
    "DrawingSpaceType",
    "uint8",
    [(DrawingSpaceType.PAGES, 0), (DrawingSpaceType.POSTER, 1)],
)

# LinkNode has no CDXML token yet.
NODE_TYPE_TOKENS = EnumTable(
    "NodeType",
    [(member, None if member is NodeType.LINK_NODE else member.value) for member in NodeType],
)
NODE_TYPE_CODES = CodeTable("NodeType", "int16", [(member, idx) for idx, member in enumerate(NodeType)])

BOND_ORDER_TOKENS = EnumTable(
    "BondOrder",
    [
        (BondOrder.SINGLE, "1"),
        (BondOrder.DOUBLE, "2"),
        (BondOrder.TRIPLE, "3"),
        (BondOrder.QUADRUPLE, "4"),
        (BondOrder.QUINTUPLE, "5"),
        (BondOrder.SEXTUPLE, "6"),
        (BondOrder.HALF, "0.5"),
        (BondOrder.ONE_HALF, "1.5"),
        (BondOrder.TWO_HALF, "2.5"),
        (BondOrder.THREE_HALF, "3.5"),
        (BondOrder.FOUR_HALF, "4.5"),
        (BondOrder.FIVE_HALF, "5.5"),
        (BondOrder.DATIVE, "dative"),
        (BondOrder.IONIC, "ionic"),
        (BondOrder.HYDROGEN, "hydrogen"),
        (BondOrder.THREE_CENTER, "threecenter"),
        (BondOrder.SINGLE_OR_DOUBLE, "1 2"),
        (BondOrder.SINGLE_OR_AROMATIC, "1 1.5"),
        (BondOrder.DOUBLE_OR_AROMATIC, "2 1.5"),
        (BondOrder.ANY, "any"),
    ],
)
# Bond orders are bit flags in an unsigned 16-bit field; "any" sets every bit.
BOND_ORDER_CODES = CodeTable(
    "BondOrder",
    "uint16",
    [
        (BondOrder.SINGLE, 0x0001),
        (BondOrder.DOUBLE, 0x0002),
        (BondOrder.TRIPLE, 0x0004),
        (BondOrder.QUADRUPLE, 0x0008),
        (BondOrder.QUINTUPLE, 0x0010),
        (BondOrder.SEXTUPLE, 0x0020),
        (BondOrder.HALF, 0x0040),
        (BondOrder.ONE_HALF, 0x0080),
        (BondOrder.TWO_HALF, 0x0100),
        (BondOrder.THREE_HALF, 0x0200),
        (BondOrder.FOUR_HALF, 0x0400),
        (BondOrder.FIVE_HALF, 0x0800),
        (BondOrder.DATIVE, 0x1000),
        (BondOrder.IONIC, 0x2000),
        (BondOrder.HYDROGEN, 0x4000),
        (BondOrder.THREE_CENTER, 0x8000),
        (BondOrder.SINGLE_OR_DOUBLE, 0x0003),
        (BondOrder.SINGLE_OR_AROMATIC, 0x0081),
        (BondOrder.DOUBLE_OR_AROMATIC, 0x0082),
        (BondOrder.ANY, 0xFFFF),
    ],
)

BOND_DISPLAY_TOKENS = EnumTable("BondDisplay", [(member, member.value) for member in BondDisplay])
BOND_DISPLAY_CODES = CodeTable("BondDisplay", "uint", [(member, idx) for idx, member in enumerate(BondDisplay)])

BOND_DOUBLE_POSITION_TOKENS = EnumTable(
    "BondDoublePosition",
    [
        (BondDoublePosition.AUTO_CENTER, "Center"),
        (BondDoublePosition.AUTO_RIGHT, "Right"),
        (BondDoublePosition.AUTO_LEFT, "Left"),
        (BondDoublePosition.USER_CENTER, "Center"),
        (BondDoublePosition.USER_RIGHT, "Right"),
        (BondDoublePosition.USER_LEFT, "Left"),
    ],
)
BOND_DOUBLE_POSITION_CODES = CodeTable(
    "BondDoublePosition",
    "int16",
    [
        (BondDoublePosition.AUTO_CENTER, 0x0000),
        (BondDoublePosition.AUTO_RIGHT, 0x0001),
        (BondDoublePosition.AUTO_LEFT, 0x0002),
        (BondDoublePosition.USER_CENTER, 0x0100),
        (BondDoublePosition.USER_RIGHT, 0x0101),
        (BondDoublePosition.USER_LEFT, 0x0102),
    ],
)

LABEL_DISPLAY_TOKENS = EnumTable(
    "LabelDisplay",
    [
        (LabelDisplay.AUTO, "Auto"),
        (LabelDisplay.LEFT, "Left"),
        (LabelDisplay.CENTER, "Center"),
        (LabelDisplay.RIGHT, "Right"),
        (LabelDisplay.ABOVE, "Above"),
        (LabelDisplay.BELOW, "Below"),
        (LabelDisplay.BEST_INITIAL, "Best"),
    ],
)
LABEL_DISPLAY_CODES = CodeTable("LabelDisplay", "uint8", [(member, idx) for idx, member in enumerate(LabelDisplay)])

RADICAL_TOKENS = EnumTable("Radical", [(member, member.value) for member in Radical])
RADICAL_CODES = CodeTable("Radical", "uint8", [(member, idx) for idx, member in enumerate(Radical)])

BOND_CIP_TOKENS = EnumTable(
    "BondCIPType",
    [
        (BondCIPType.UNDETERMINED, "U"),
        (BondCIPType.NONE, "N"),
        (BondCIPType.E, "E"),
        (BondCIPType.Z, "Z"),
    ],
)
BOND_CIP_CODES = CodeTable("BondCIPType", "uint8", [(member, idx) for idx, member in enumerate(BondCIPType)])

CHARSET_TOKEN_TABLE: EnumTable[CharSet] = EnumTable("CharSet", list(CHARSET_TOKENS.items()))
