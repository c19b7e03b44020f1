from __future__ import annotations

from typing import List, Mapping, Tuple

from .charsets import CodecIssue, resolve_codec
from .entities import (
    BUILTIN_COLORS,
    PLAIN_FACE,
    Color,
    Font,
    FontFace,
    FontStyle,
    StyledChunk,
    StyledString,
)
from .errors import MissingColorError, SizeMismatchError
from .logging import WarningKind, WarningLog
from .primitives import read_uint16, read_uint32
from .settings import DEFAULT_SETTINGS, DecoderSettings

FONT_STYLE_SIZE = 8
STYLE_RUN_SIZE = 2 + FONT_STYLE_SIZE
TEXT_SIZE_SCALE = 1.0 / 20.0


class StyledTextAssembler:
    """
    Turns style runs plus a byte buffer into ordered text chunks.

    Font and color lookups share the document tables; a missing font is
    replaced by the configured fallback, a missing color is fatal.
    """

    def __init__(
        self,
        fonts: Mapping[int, Font],
        colors: Mapping[int, Color],
        settings: DecoderSettings = DEFAULT_SETTINGS,
        log: WarningLog | None = None,
    ) -> None:
        self.fonts = fonts
        self.colors = colors
        self.settings = settings
        self.log = log if log is not None else WarningLog()

    @property
    def fallback_font(self) -> Font:
        return Font(name=self.settings.fallback_font_name, charset=self.settings.fallback_charset)

    def font(self, index: int, position: int | None = None) -> Font:
        font = self.fonts.get(index)
        if font is None:
            self.log.record(
                WarningKind.MISSING_FONT,
                f"font {index}(0x{index:x}) not found, using {self.settings.fallback_font_name}",
                position,
            )
            font = self.fallback_font
        return font

    def color(self, index: int, position: int | None = None) -> Color:
        color = self.colors.get(index)
        if color is None:
            raise MissingColorError(index, position)
        return color

    def read_font_ref(self, data: bytes, offset: int, position: int | None = None) -> Font:
        return self.font(read_uint16(data, offset, position), position)

    def read_color_ref(
        self, data: bytes, offset: int, width: int, position: int | None = None
    ) -> Color:
        if width == 2:
            index = read_uint16(data, offset, position)
        elif width == 4:
            index = read_uint32(data, offset, position)
        else:
            raise SizeMismatchError(f"color reference of {width} bytes is not supported", position)
        return self.color(index, position)

    def read_font_style(self, data: bytes, offset: int, position: int | None = None) -> FontStyle:
        font = self.read_font_ref(data, offset, position)
        face = FontFace.from_bits(read_uint16(data, offset + 2, position))
        size = read_uint16(data, offset + 4, position) * TEXT_SIZE_SCALE
        color = self.read_color_ref(data, offset + 6, 2, position)
        return FontStyle(font=font, face=face, size=size, color=color)

    def decode_text(self, raw: bytes, font: Font, position: int | None = None) -> str:
        codec, issue = resolve_codec(font.charset, self.settings.fallback_codec)
        if issue is CodecIssue.UNKNOWN:
            self.log.record(
                WarningKind.UNKNOWN_CHARSET,
                f"font {font.name!r} has unknown charset, decoding as {codec}",
                position,
            )
        elif issue is CodecIssue.UNMAPPED:
            self.log.record(
                WarningKind.UNMAPPED_CHARSET,
                f"unsupported charset {font.charset.name} for font {font.name!r}, decoding as {codec}",
                position,
            )
        return raw.decode(codec, errors=self.settings.text_errors)

    def read_runs(
        self, data: bytes, offset: int, position: int | None = None
    ) -> Tuple[List[Tuple[int, FontStyle]], int]:
        count = read_uint16(data, offset, position)
        cursor = offset + 2
        runs: List[Tuple[int, FontStyle]] = []
        for _ in range(count):
            start = read_uint16(data, cursor, position)
            runs.append((start, self.read_font_style(data, cursor + 2, position)))
            cursor += STYLE_RUN_SIZE
        return runs, cursor

    def assemble(
        self,
        data: bytes,
        offset: int = 0,
        length: int | None = None,
        position: int | None = None,
    ) -> StyledString:
        end = len(data) if length is None else offset + length
        if end > len(data):
            raise SizeMismatchError(
                f"styled string of {end - offset} bytes overruns payload of {len(data)} bytes",
                position,
            )
        runs, cursor = self.read_runs(data, offset, position)
        if cursor > end:
            raise SizeMismatchError(
                f"{len(runs)} style runs need {cursor - offset} bytes, string has {end - offset}",
                position,
            )
        text = data[cursor:end]
        if not runs:
            return StyledString((self._default_chunk(text, position),))

        # sorted() is stable, so runs sharing a start keep their order.
        runs = sorted(runs, key=lambda run: run[0])
        chunks: List[StyledChunk] = []
        for idx, (start, style) in enumerate(runs):
            stop = runs[idx + 1][0] if idx + 1 < len(runs) else len(text)
            stop = min(stop, len(text))
            if start >= stop:
                continue
            chunks.append(
                StyledChunk(
                    font=style.font,
                    size=style.size,
                    face=style.face,
                    color=style.color,
                    text=self.decode_text(text[start:stop], style.font, position),
                )
            )
        return StyledString(tuple(chunks))

    def _default_chunk(self, text: bytes, position: int | None) -> StyledChunk:
        font = self.fonts.get(0) or self.fallback_font
        color = self.colors.get(0) or BUILTIN_COLORS[0]
        return StyledChunk(
            font=font,
            size=self.settings.default_text_size,
            face=PLAIN_FACE,
            color=color,
            text=self.decode_text(text, font, position),
        )
