"""
Typed accessors over raw property payloads.

A ``PropertyDecoder`` is created once per document and shares the font
table, color table, reference resolver and warning log by reference.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Mapping, Type, TypeVar

from . import primitives as prim
from .charsets import charset_from_code
from .entities import (
    BUILTIN_COLORS,
    FIRST_DOCUMENT_COLOR_INDEX,
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
    StyledString,
)
from .enums import CodeTable
from .errors import PropertyValueError, SizeMismatchError, UnknownValueError
from .logging import WarningKind, WarningLog, get_logger
from .refs import ReferenceResolver, ResolutionMode
from .settings import DEFAULT_SETTINGS, DecoderSettings
from .styled_text import FONT_STYLE_SIZE, StyledTextAssembler
from .tree import Property

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

logger = get_logger(__name__)

REF_SIZE = 4
DATE_SIZE = 14
REPRESENTS_ENTRY_SIZE = 6
ATOM_CHARGE_TAG = 0x0421
ATOM_RADICAL_TAG = 0x0422
REPRESENTED_PROPERTIES: dict[int, str] = {
    ATOM_CHARGE_TAG: "Charge",
    ATOM_RADICAL_TAG: "Radical",
}
LINE_HEIGHT_VARIABLE = 0
LINE_HEIGHT_AUTOMATIC = 1
COLOR_ENTRY_SIZE = 6
COLOR_SCALE = 1.0 / 65536.0


def decode_font_table(prop: Property) -> FontTable:
    """
    Font table layout: platform(u16), count(u16), then per font
    id(u16), charset(u16), name length(u16) and the name bytes.
    """
    data, pos = prop.payload, prop.position
    table = FontTable(platform=prim.read_uint16(data, 0, pos))
    count = prim.read_uint16(data, 2, pos)
    cursor = 4
    for _ in range(count):
        font_id = prim.read_uint16(data, cursor, pos)
        code = prim.read_uint16(data, cursor + 2, pos)
        nchars = prim.read_uint16(data, cursor + 4, pos)
        cursor += 6
        charset = charset_from_code(code)
        if charset is None:
            raise PropertyValueError(f"charset 0x{code:x} not recognized", pos)
        if cursor + nchars > len(data):
            raise SizeMismatchError(f"font name of {nchars} bytes overruns font table", pos)
        name = data[cursor:cursor + nchars].decode("latin-1")
        cursor += nchars
        table.fonts[font_id] = Font(name=name, charset=charset, id=font_id)
    logger.debug("decoded %d fonts", len(table.fonts))
    return table


def decode_color_table(prop: Property) -> dict[int, Color]:
    data, pos = prop.payload, prop.position
    colors: dict[int, Color] = dict(enumerate(BUILTIN_COLORS))
    if not data:
        return colors
    count = prim.read_count(data, COLOR_ENTRY_SIZE, pos)
    channels = prim.uint16_array(data, 2, count * 3).reshape(-1, 3) * COLOR_SCALE
    for idx, (red, green, blue) in enumerate(channels, start=FIRST_DOCUMENT_COLOR_INDEX):
        colors[idx] = Color(float(red), float(green), float(blue))
    logger.debug("decoded %d document colors", count)
    return colors


class PropertyDecoder:
    def __init__(
        self,
        fonts: Mapping[int, Font] | None = None,
        colors: Mapping[int, Color] | None = None,
        resolver: ReferenceResolver | None = None,
        settings: DecoderSettings = DEFAULT_SETTINGS,
        log: WarningLog | None = None,
    ) -> None:
        if log is None:
            log = resolver.log if resolver is not None else WarningLog()
        self.log = log
        self.fonts = fonts if fonts is not None else {}
        self.colors = colors if colors is not None else dict(enumerate(BUILTIN_COLORS))
        self.resolver = resolver if resolver is not None else ReferenceResolver(self.log)
        self.settings = settings
        self.text = StyledTextAssembler(self.fonts, self.colors, settings, self.log)

    # scalars

    def as_boolean(self, prop: Property) -> bool:
        if prop.length == 0:
            return True
        prim.require_size(prop.payload, 1, prop.position)
        return prim.read_uint8(prop.payload, 0, prop.position) > 0

    def as_uint(self, prop: Property) -> int:
        return self._sized_int(prop, {1: "uint8", 2: "uint16", 4: "uint32"})

    def as_int(self, prop: Property) -> int:
        return self._sized_int(prop, {1: "int8", 2: "int16", 4: "int32"})

    def _sized_int(self, prop: Property, kinds: Mapping[int, str]) -> int:
        kind = kinds.get(prop.length)
        if kind is None:
            raise SizeMismatchError(
                f"property size doesn't match, current size: {prop.length} expected size: 1, 2 or 4",
                prop.position,
            )
        return prim.read_scalar(kind, prop.payload, 0, prop.position)

    def _exact(self, prop: Property, kind: str, size: int):
        prim.require_size(prop.payload, size, prop.position)
        return prim.read_scalar(kind, prop.payload, 0, prop.position)

    def as_uint8(self, prop: Property) -> int:
        return self._exact(prop, "uint8", 1)

    def as_int8(self, prop: Property) -> int:
        return self._exact(prop, "int8", 1)

    def as_uint16(self, prop: Property) -> int:
        return self._exact(prop, "uint16", 2)

    def as_int16(self, prop: Property) -> int:
        return self._exact(prop, "int16", 2)

    def as_uint32(self, prop: Property) -> int:
        return self._exact(prop, "uint32", 4)

    def as_int32(self, prop: Property) -> int:
        return self._exact(prop, "int32", 4)

    def as_int64(self, prop: Property) -> int:
        return self._exact(prop, "int64", 8)

    def as_float64(self, prop: Property) -> float:
        return self._exact(prop, "float64", 8)

    # arrays

    def as_float64_array(self, prop: Property) -> List[float]:
        count = prim.require_multiple(prop.payload, 8, prop.position)
        return prim.float64_array(prop.payload, 0, count).tolist()

    def as_int16_array(self, prop: Property) -> List[int]:
        count = prim.require_multiple(prop.payload, 2, prop.position)
        return prim.int16_array(prop.payload, 0, count).tolist()

    def as_int16_list_with_count(self, prop: Property) -> List[int]:
        count = prim.read_count(prop.payload, 2, prop.position)
        return prim.int16_array(prop.payload, 2, count).tolist()

    # geometry

    def as_coordinate(self, prop: Property) -> float:
        prim.require_size(prop.payload, prim.COORDINATE_SIZE, prop.position)
        return prim.read_coordinate(prop.payload, 0, prop.position)

    def as_point2d(self, prop: Property) -> Point2D:
        prim.require_size(prop.payload, prim.POINT2D_SIZE, prop.position)
        return prim.read_point2d(prop.payload, 0, prop.position)

    def as_point3d(self, prop: Property, *, ascending: bool = False) -> Point3D:
        prim.require_size(prop.payload, prim.POINT3D_SIZE, prop.position)
        return prim.read_point3d(prop.payload, 0, prop.position, ascending=ascending)

    def as_rectangle(self, prop: Property) -> Rectangle:
        prim.require_size(prop.payload, prim.RECTANGLE_SIZE, prop.position)
        return prim.read_rectangle(prop.payload, 0, prop.position)

    def as_point2d_array(self, prop: Property) -> List[Point2D]:
        count = prim.read_count(prop.payload, prim.POINT2D_SIZE, prop.position)
        return prim.read_point2d_array(prop.payload, 2, count)

    def as_point3d_array(self, prop: Property) -> List[Point3D]:
        count = prim.read_count(prop.payload, prim.POINT3D_SIZE, prop.position)
        return prim.read_point3d_array(prop.payload, 2, count)

    def as_date(self, prop: Property) -> dt.datetime | None:
        prim.require_size(prop.payload, DATE_SIZE, prop.position)
        fields = prim.int16_array(prop.payload, 0, 6).tolist()
        # All-zero dates mark an unset timestamp.
        if not any(fields):
            return None
        try:
            return dt.datetime(*fields)
        except ValueError as exc:
            raise PropertyValueError(f"invalid date {fields}: {exc}", prop.position) from exc

    # references

    def as_object_ref(
        self,
        prop: Property,
        expected_type: Type[T] = object,
        mode: ResolutionMode = ResolutionMode.RIGID,
    ) -> T | None:
        prim.require_size(prop.payload, REF_SIZE, prop.position)
        ref_id = prim.read_int32(prop.payload, 0, prop.position)
        return self.resolver.resolve(ref_id, expected_type, mode, prop.position)

    def as_object_ref_array(
        self,
        prop: Property,
        expected_type: Type[T] = object,
        mode: ResolutionMode = ResolutionMode.LENIENT,
    ) -> List[T]:
        count = prim.require_multiple(prop.payload, REF_SIZE, prop.position)
        return self._resolve_all(prim.int32_array(prop.payload, 0, count), expected_type, mode, prop)

    def as_object_ref_array_with_count(
        self,
        prop: Property,
        expected_type: Type[T] = object,
        mode: ResolutionMode = ResolutionMode.LENIENT,
    ) -> List[T]:
        count = prim.read_count(prop.payload, REF_SIZE, prop.position)
        return self._resolve_all(prim.int32_array(prop.payload, 2, count), expected_type, mode, prop)

    def _resolve_all(self, ids, expected_type, mode, prop: Property) -> list:
        resolved = []
        for ref_id in ids.tolist():
            handle = self.resolver.resolve(ref_id, expected_type, mode, prop.position)
            if handle is not None:
                resolved.append(handle)
        return resolved

    def as_object_ref_map(
        self,
        prop: Property,
        key_type: Type[K] = object,
        value_type: Type[V] = object,
        mode: ResolutionMode = ResolutionMode.LENIENT,
    ) -> dict[K, V]:
        count = prim.require_multiple(prop.payload, 2 * REF_SIZE, prop.position)
        pairs = prim.int32_array(prop.payload, 0, count * 2).reshape(-1, 2).tolist()
        mapping: dict[K, V] = {}
        for key_id, value_id in pairs:
            key = self.resolver.resolve(key_id, key_type, mode, prop.position)
            value = self.resolver.resolve(value_id, value_type, mode, prop.position)
            if key is not None and value is not None:
                mapping[key] = value
        return mapping

    def as_represents_properties(self, prop: Property) -> dict[str, object]:
        """
        Each 6-byte entry is an object id (i32) and the tag (u16) of the atom
        property that object stands for.
        """
        data, pos = prop.payload, prop.position
        count = prim.require_multiple(data, REPRESENTS_ENTRY_SIZE, pos)
        represented: dict[str, object] = {}
        for idx in range(count):
            offset = idx * REPRESENTS_ENTRY_SIZE
            ref_id = prim.read_int32(data, offset, pos)
            handle = self.resolver.resolve(ref_id, object, ResolutionMode.RIGID, pos)
            if handle is None:
                raise PropertyValueError("null object as represented value", pos)
            tag = prim.read_uint16(data, offset + 4, pos)
            name = REPRESENTED_PROPERTIES.get(tag)
            if name is None:
                raise PropertyValueError(f"represented property tag 0x{tag:04x} not recognized", pos)
            represented[name] = handle
        return represented

    # fonts, colors and text

    def as_font_ref(self, prop: Property) -> Font:
        prim.require_size(prop.payload, 2, prop.position)
        return self.text.read_font_ref(prop.payload, 0, prop.position)

    def as_color_ref(self, prop: Property) -> Color:
        if prop.length not in (2, 4):
            raise SizeMismatchError(
                f"property size doesn't match, current size: {prop.length} expected size: 2 or 4",
                prop.position,
            )
        return self.text.read_color_ref(prop.payload, 0, prop.length, prop.position)

    def as_font_face(self, prop: Property) -> FontFace:
        return FontFace.from_bits(self.as_uint16(prop))

    def as_font_style(self, prop: Property) -> FontStyle:
        prim.require_size(prop.payload, FONT_STYLE_SIZE, prop.position)
        return self.text.read_font_style(prop.payload, 0, prop.position)

    def as_line_height(self, prop: Property) -> LineHeight:
        value = self.as_uint16(prop)
        if value == LINE_HEIGHT_VARIABLE:
            return LineHeight(variable=True)
        if value == LINE_HEIGHT_AUTOMATIC:
            return LineHeight(automatic=True)
        return LineHeight(points=value / 20.0)

    def as_styled_string(self, prop: Property) -> StyledString:
        return self.text.assemble(prop.payload, 0, prop.length, prop.position)

    def as_unstyled_string(self, prop: Property) -> str:
        styled = self.as_styled_string(prop)
        if len(styled.chunks) > 1:
            raise PropertyValueError(
                f"string contains unexpected count of styles {len(styled.chunks)}",
                prop.position,
            )
        return styled.text

    def as_string(self, prop: Property) -> str:
        return prop.payload.decode("latin-1")

    # lists

    def as_element_list(self, prop: Property) -> ElementList:
        prim.require_multiple(prop.payload, 2, prop.position)
        if not prop.payload:
            return ElementList(elements=())
        count = prim.read_int16(prop.payload, 0, prop.position)
        elements = prim.uint16_array(prop.payload, 2).tolist()
        return ElementList(elements=tuple(elements), exclusive=count < 0)

    def as_generic_list(self, prop: Property) -> GenericList:
        data, pos = prop.payload, prop.position
        count = prim.read_int16(data, 0, pos)
        cursor = 2
        elements: List[str] = []
        for _ in range(abs(count)):
            length = prim.read_uint16(data, cursor, pos)
            styled = self.text.assemble(data, cursor + 2, length, pos)
            elements.append(styled.text)
            cursor += 2 + length
        return GenericList(elements=tuple(elements), exclusive=count < 0)

    # enumerations

    def as_enum(
        self,
        prop: Property,
        table: CodeTable[T],
        mode: ResolutionMode = ResolutionMode.RIGID,
        default: T | None = None,
    ) -> T | None:
        if table.kind == "uint":
            code = self.as_uint(prop)
        else:
            code = self._exact(prop, table.kind, prim.scalar_size(table.kind))
        try:
            return table.member_for(code, prop.position)
        except UnknownValueError as exc:
            if mode is ResolutionMode.RIGID:
                raise
            self.log.record(WarningKind.UNRECOGNIZED_VALUE, exc.message, prop.position)
            return default

    @classmethod
    def for_document(
        cls,
        font_table: Property | None = None,
        color_table: Property | None = None,
        resolver: ReferenceResolver | None = None,
        settings: DecoderSettings = DEFAULT_SETTINGS,
        log: WarningLog | None = None,
    ) -> "PropertyDecoder":
        """Decode the document font and color tables and bind them to a new decoder."""
        fonts = decode_font_table(font_table).fonts if font_table is not None else {}
        colors = decode_color_table(color_table) if color_table is not None else None
        return cls(fonts, colors, resolver, settings, log)
