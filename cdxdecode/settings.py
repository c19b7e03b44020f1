from __future__ import annotations

from dataclasses import dataclass

from .charsets import CharSet


@dataclass(frozen=True)
class DecoderSettings:
    fallback_font_name: str = "Arial"
    fallback_charset: CharSet = CharSet.WIN31_LATIN1
    fallback_codec: str = "cp1252"
    default_text_size: float = 12.0
    text_errors: str = "replace"


DEFAULT_SETTINGS = DecoderSettings()
