from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List, Tuple

from .charsets import CharSet


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Rectangle:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    RED: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.YELLOW = Color(1.0, 1.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.CYAN = Color(0.0, 1.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0)

# Index 2 is the background and index 3 the foreground.
BUILTIN_COLORS: Tuple[Color, ...] = (
    Color.BLACK,
    Color.WHITE,
    Color.WHITE,
    Color.BLACK,
    Color.RED,
    Color.YELLOW,
    Color.GREEN,
    Color.CYAN,
    Color.BLUE,
    Color.MAGENTA,
)
BACKGROUND_COLOR_INDEX = 2
FOREGROUND_COLOR_INDEX = 3
FIRST_DOCUMENT_COLOR_INDEX = 2


@dataclass(frozen=True)
class Font:
    name: str
    charset: CharSet
    id: int = 0


@dataclass(frozen=True)
class FontFace:
    bold: bool = False
    italic: bool = False
    underline: bool = False
    outline: bool = False
    shadow: bool = False
    subscript: bool = False
    superscript: bool = False
    formula: bool = False

    BOLD: ClassVar[int] = 0x01
    ITALIC: ClassVar[int] = 0x02
    UNDERLINE: ClassVar[int] = 0x04
    OUTLINE: ClassVar[int] = 0x08
    SHADOW: ClassVar[int] = 0x10
    SUBSCRIPT: ClassVar[int] = 0x20
    SUPERSCRIPT: ClassVar[int] = 0x40
    FORMULA: ClassVar[int] = 0x60

    @classmethod
    def from_bits(cls, bits: int) -> "FontFace":
        script = bits & cls.FORMULA
        return cls(
            bold=bool(bits & cls.BOLD),
            italic=bool(bits & cls.ITALIC),
            underline=bool(bits & cls.UNDERLINE),
            outline=bool(bits & cls.OUTLINE),
            shadow=bool(bits & cls.SHADOW),
            subscript=script == cls.SUBSCRIPT,
            superscript=script == cls.SUPERSCRIPT,
            formula=script == cls.FORMULA,
        )

    def to_bits(self) -> int:
        bits = 0
        if self.bold:
            bits |= self.BOLD
        if self.italic:
            bits |= self.ITALIC
        if self.underline:
            bits |= self.UNDERLINE
        if self.outline:
            bits |= self.OUTLINE
        if self.shadow:
            bits |= self.SHADOW
        if self.formula:
            bits |= self.FORMULA
        elif self.subscript:
            bits |= self.SUBSCRIPT
        elif self.superscript:
            bits |= self.SUPERSCRIPT
        return bits


PLAIN_FACE = FontFace()


@dataclass(frozen=True)
class FontStyle:
    font: Font
    face: FontFace
    size: float
    color: Color


@dataclass(frozen=True)
class StyledChunk:
    font: Font
    size: float
    face: FontFace
    color: Color
    text: str


@dataclass(frozen=True)
class StyledString:
    chunks: Tuple[StyledChunk, ...] = ()

    @property
    def text(self) -> str:
        return "".join(chunk.text for chunk in self.chunks)

    def __len__(self) -> int:
        return len(self.chunks)


@dataclass(frozen=True)
class ElementList:
    elements: Tuple[int, ...]
    exclusive: bool = False


@dataclass(frozen=True)
class GenericList:
    elements: Tuple[str, ...]
    exclusive: bool = False


@dataclass
class LineHeight:
    variable: bool = False
    automatic: bool = False
    points: float | None = None


@dataclass
class FontTable:
    platform: int = 0
    fonts: dict[int, Font] = field(default_factory=dict)

    def ordered(self) -> List[Font]:
        return [self.fonts[key] for key in sorted(self.fonts)]
