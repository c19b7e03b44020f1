"""
Decoding core for binary CDX chemical drawing documents.
"""

from .charsets import CHARSET_TOKENS, CharSet, CodecIssue, charset_from_code, codec_for, resolve_codec
from .entities import (
    BUILTIN_COLORS,
    PLAIN_FACE,
    Color,
    ElementList,
    Font,
    FontFace,
    FontStyle,
    FontTable,
    GenericList,
    LineHeight,
    Point2D,
    Point3D,
    Rectangle,
    StyledChunk,
    StyledString,
)
from .enums import (
    BOND_CIP_CODES,
    BOND_CIP_TOKENS,
    BOND_DISPLAY_CODES,
    BOND_DISPLAY_TOKENS,
    BOND_DOUBLE_POSITION_CODES,
    BOND_DOUBLE_POSITION_TOKENS,
    BOND_ORDER_CODES,
    BOND_ORDER_TOKENS,
    CHARSET_TOKEN_TABLE,
    DRAWING_SPACE_CODES,
    DRAWING_SPACE_TOKENS,
    JUSTIFICATION_CODES,
    JUSTIFICATION_TOKENS,
    LABEL_DISPLAY_CODES,
    LABEL_DISPLAY_TOKENS,
    NODE_TYPE_CODES,
    NODE_TYPE_TOKENS,
    RADICAL_CODES,
    RADICAL_TOKENS,
    BondCIPType,
    BondDisplay,
    BondDoublePosition,
    BondOrder,
    CodeTable,
    DrawingSpaceType,
    EnumTable,
    Justification,
    LabelDisplay,
    NodeType,
    Radical,
)
from .errors import (
    CDXDecodeError,
    EnumLookupError,
    MissingColorError,
    PropertyValueError,
    ReferenceResolutionError,
    SizeMismatchError,
    TypeMismatchError,
    UnknownTokenError,
    UnknownValueError,
    UnresolvedReferenceError,
)
from .logging import DecodeWarning, WarningKind, WarningLog, get_logger
from .properties import PropertyDecoder, decode_color_table, decode_font_table
from .refs import ReferenceResolver, ResolutionMode
from .settings import DEFAULT_SETTINGS, DecoderSettings
from .styled_text import StyledTextAssembler
from .tree import COLOR_TABLE_TAG, FONT_TABLE_TAG, Property, TaggedObject, is_object_tag

__all__ = [
    "CHARSET_TOKENS",
    "CharSet",
    "CodecIssue",
    "charset_from_code",
    "codec_for",
    "resolve_codec",
    "BUILTIN_COLORS",
    "PLAIN_FACE",
    "Color",
    "ElementList",
    "Font",
    "FontFace",
    "FontStyle",
    "FontTable",
    "GenericList",
    "LineHeight",
    "Point2D",
    "Point3D",
    "Rectangle",
    "StyledChunk",
    "StyledString",
    "EnumTable",
    "CodeTable",
    "Justification",
    "DrawingSpaceType",
    "NodeType",
    "BondOrder",
    "BondDisplay",
    "BondDoublePosition",
    "LabelDisplay",
    "Radical",
    "BondCIPType",
    "JUSTIFICATION_TOKENS",
    "JUSTIFICATION_CODES",
    "DRAWING_SPACE_TOKENS",
    "DRAWING_SPACE_CODES",
    "NODE_TYPE_TOKENS",
    "NODE_TYPE_CODES",
    "BOND_ORDER_TOKENS",
    "BOND_ORDER_CODES",
    "BOND_DISPLAY_TOKENS",
    "BOND_DISPLAY_CODES",
    "BOND_DOUBLE_POSITION_TOKENS",
    "BOND_DOUBLE_POSITION_CODES",
    "LABEL_DISPLAY_TOKENS",
    "LABEL_DISPLAY_CODES",
    "RADICAL_TOKENS",
    "RADICAL_CODES",
    "BOND_CIP_TOKENS",
    "BOND_CIP_CODES",
    "CHARSET_TOKEN_TABLE",
    "CDXDecodeError",
    "EnumLookupError",
    "MissingColorError",
    "PropertyValueError",
    "ReferenceResolutionError",
    "SizeMismatchError",
    "TypeMismatchError",
    "UnknownTokenError",
    "UnknownValueError",
    "UnresolvedReferenceError",
    "DecodeWarning",
    "WarningKind",
    "WarningLog",
    "get_logger",
    "PropertyDecoder",
    "decode_color_table",
    "decode_font_table",
    "ReferenceResolver",
    "ResolutionMode",
    "DEFAULT_SETTINGS",
    "DecoderSettings",
    "StyledTextAssembler",
    "COLOR_TABLE_TAG",
    "FONT_TABLE_TAG",
    "Property",
    "TaggedObject",
    "is_object_tag",
]
