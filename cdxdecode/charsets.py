"""
Legacy character set codes carried in CDX font tables and their Python codecs.
"""

from __future__ import annotations

import codecs
from enum import Enum, IntEnum
from typing import Tuple


class CharSet(IntEnum):
    UNKNOWN = 0
    EBCDIC_OEM = 37
    MSDOS_US = 437
    EBCDIC_500V1 = 500
    ASMO_708 = 708
    ASMO_449P = 709
    ARABIC_TRANSPARENT = 710
    ARABIC_TRANSPARENT_ASMO = 720
    GREEK_437G = 737
    BALTIC_OEM = 775
    MSDOS_LATIN1 = 850
    MSDOS_LATIN2 = 852
    IBM_CYRILLIC = 855
    IBM_TURKISH = 857
    PORTUGUESE = 860
    ICELANDIC = 861
    HEBREW_OEM = 862
    CANADIAN_FRENCH = 863
    ARABIC_OEM = 864
    NORDIC = 865
    RUSSIAN = 866
    IBM_MODERN_GREEK = 869
    THAI = 874
    EBCDIC = 875
    JAPANESE = 932
    CHINESE_SIMPLIFIED = 936
    KOREAN = 949
    CHINESE_TRADITIONAL = 950
    UNICODE_ISO10646 = 1200
    WIN31_EASTERN_EUROPEAN = 1250
    WIN31_CYRILLIC = 1251
    WIN31_LATIN1 = 1252
    WIN31_GREEK = 1253
    WIN31_TURKISH = 1254
    HEBREW = 1255
    ARABIC = 1256
    BALTIC = 1257
    VIETNAMESE = 1258
    KOREAN_JOHAB = 1361
    MAC_ROMAN = 10000
    MAC_JAPANESE = 10001
    MAC_TRAD_CHINESE = 10002
    MAC_KOREAN = 10003
    MAC_ARABIC = 10004
    MAC_HEBREW = 10005
    MAC_GREEK = 10006
    MAC_CYRILLIC = 10007
    MAC_RESERVED = 10008
    MAC_DEVANAGARI = 10009
    MAC_GURMUKHI = 10010
    MAC_GUJARATI = 10011
    MAC_ORIYA = 10012
    MAC_BENGALI = 10013
    MAC_TAMIL = 10014
    MAC_TELUGU = 10015
    MAC_KANNADA = 10016
    MAC_MALAYALAM = 10017
    MAC_SINHALESE = 10018
    MAC_BURMESE = 10019
    MAC_KHMER = 10020
    MAC_THAI = 10021
    MAC_LAO = 10022
    MAC_GEORGIAN = 10023
    MAC_ARMENIAN = 10024
    MAC_SIMP_CHINESE = 10025
    MAC_TIBETAN = 10026
    MAC_MONGOLIAN = 10027
    MAC_ETHIOPIC = 10028
    MAC_CENTRAL_EURO_ROMAN = 10029
    MAC_VIETNAMESE = 10030
    MAC_EXT_ARABIC = 10031
    MAC_UNINTERPRETED = 10032
    MAC_ICELANDIC = 10079
    MAC_TURKISH = 10081


# CDXML spells these charset tokens differently from the enum member names.
CHARSET_TOKENS: dict[CharSet, str] = {
    CharSet.UNKNOWN: "Unknown",
    CharSet.EBCDIC_OEM: "EBCDICOEM",
    CharSet.MSDOS_US: "MSDOSUS",
    CharSet.EBCDIC_500V1: "EBCDIC500V1",
    CharSet.ASMO_708: "ASMO-708",
    CharSet.ASMO_449P: "ArabicASMO449P",
    CharSet.ARABIC_TRANSPARENT: "ArabicTransparent",
    CharSet.ARABIC_TRANSPARENT_ASMO: "DOS-720",
    CharSet.GREEK_437G: "Greek437G",
    CharSet.BALTIC_OEM: "cp775",
    CharSet.MSDOS_LATIN1: "windows-850",
    CharSet.MSDOS_LATIN2: "ibm852",
    CharSet.IBM_CYRILLIC: "cp855",
    CharSet.IBM_TURKISH: "cp857",
    CharSet.PORTUGUESE: "cp860",
    CharSet.ICELANDIC: "cp861",
    CharSet.HEBREW_OEM: "DOS-862",
    CharSet.CANADIAN_FRENCH: "cp863",
    CharSet.ARABIC_OEM: "cp864",
    CharSet.NORDIC: "cp865",
    CharSet.RUSSIAN: "cp866",
    CharSet.IBM_MODERN_GREEK: "cp869",
    CharSet.THAI: "windows-874",
    CharSet.EBCDIC: "EBCDIC",
    CharSet.JAPANESE: "shift_jis",
    CharSet.CHINESE_SIMPLIFIED: "gb2312",
    CharSet.KOREAN: "ks_c_5601-1987",
    CharSet.CHINESE_TRADITIONAL: "big5",
    CharSet.UNICODE_ISO10646: "iso-10646",
    CharSet.WIN31_EASTERN_EUROPEAN: "windows-1250",
    CharSet.WIN31_CYRILLIC: "windows-1251",
    CharSet.WIN31_LATIN1: "iso-8859-1",
    CharSet.WIN31_GREEK: "iso-8859-7",
    CharSet.WIN31_TURKISH: "iso-8859-9",
    CharSet.HEBREW: "windows-1255",
    CharSet.ARABIC: "windows-1256",
    CharSet.BALTIC: "windows-1257",
    CharSet.VIETNAMESE: "windows-1258",
    CharSet.KOREAN_JOHAB: "windows-1361",
    CharSet.MAC_ROMAN: "x-mac-roman",
    CharSet.MAC_JAPANESE: "x-mac-japanese",
    CharSet.MAC_TRAD_CHINESE: "x-mac-tradchinese",
    CharSet.MAC_KOREAN: "x-mac-korean",
    CharSet.MAC_ARABIC: "x-mac-arabic",
    CharSet.MAC_HEBREW: "x-mac-hebrew",
    CharSet.MAC_GREEK: "x-mac-greek",
    CharSet.MAC_CYRILLIC: "x-mac-cyrillic",
    CharSet.MAC_RESERVED: "x-mac-reserved",
    CharSet.MAC_DEVANAGARI: "x-mac-devanagari",
    CharSet.MAC_GURMUKHI: "x-mac-gurmukhi",
    CharSet.MAC_GUJARATI: "x-mac-gujarati",
    CharSet.MAC_ORIYA: "x-mac-oriya",
    CharSet.MAC_BENGALI: "x-mac-nengali",
    CharSet.MAC_TAMIL: "x-mac-tamil",
    CharSet.MAC_TELUGU: "x-mac-telugu",
    CharSet.MAC_KANNADA: "x-mac-kannada",
    CharSet.MAC_MALAYALAM: "x-mac-Malayalam",
    CharSet.MAC_SINHALESE: "x-mac-sinhalese",
    CharSet.MAC_BURMESE: "x-mac-burmese",
    CharSet.MAC_KHMER: "x-mac-khmer",
    CharSet.MAC_THAI: "x-mac-thai",
    CharSet.MAC_LAO: "x-mac-lao",
    CharSet.MAC_GEORGIAN: "x-mac-georgian",
    CharSet.MAC_ARMENIAN: "x-mac-armenian",
    CharSet.MAC_SIMP_CHINESE: "x-mac-simpChinese",
    CharSet.MAC_TIBETAN: "x-mac-tibetan",
    CharSet.MAC_MONGOLIAN: "x-mac-mongolian",
    CharSet.MAC_ETHIOPIC: "x-mac-ethiopic",
    CharSet.MAC_CENTRAL_EURO_ROMAN: "x-mac-ce",
    CharSet.MAC_VIETNAMESE: "x-mac-vietnamese",
    CharSet.MAC_EXT_ARABIC: "x-mac-extArabic",
    CharSet.MAC_UNINTERPRETED: "x-mac-uninterpreted",
    CharSet.MAC_ICELANDIC: "x-mac-icelandic",
    CharSet.MAC_TURKISH: "x-mac-turkish",
}

_CODECS: dict[CharSet, str] = {
    CharSet.MSDOS_US: "ascii",
    CharSet.GREEK_437G: "cp437",
    CharSet.BALTIC_OEM: "cp775",
    CharSet.MSDOS_LATIN1: "cp850",
    CharSet.MSDOS_LATIN2: "cp852",
    CharSet.IBM_CYRILLIC: "cp855",
    CharSet.IBM_TURKISH: "cp857",
    CharSet.PORTUGUESE: "cp860",
    CharSet.ICELANDIC: "cp861",
    CharSet.HEBREW_OEM: "cp862",
    CharSet.CANADIAN_FRENCH: "cp863",
    CharSet.ARABIC_OEM: "cp864",
    CharSet.NORDIC: "cp865",
    CharSet.RUSSIAN: "cp866",
    CharSet.IBM_MODERN_GREEK: "cp869",
    CharSet.THAI: "cp874",
    CharSet.JAPANESE: "shift_jis",
    CharSet.CHINESE_SIMPLIFIED: "gb2312",
    CharSet.KOREAN: "iso2022_kr",
    CharSet.CHINESE_TRADITIONAL: "big5",
    CharSet.UNICODE_ISO10646: "utf-8",
    CharSet.WIN31_EASTERN_EUROPEAN: "cp1250",
    CharSet.WIN31_CYRILLIC: "cp1251",
    CharSet.WIN31_LATIN1: "cp1252",
    CharSet.WIN31_GREEK: "iso8859_7",
    CharSet.WIN31_TURKISH: "iso8859_9",
    CharSet.HEBREW: "cp1255",
    CharSet.ARABIC: "cp1256",
    CharSet.BALTIC: "cp1257",
    CharSet.VIETNAMESE: "cp1258",
    CharSet.MAC_ROMAN: "mac_roman",
    CharSet.MAC_JAPANESE: "shift_jis",
    CharSet.MAC_TRAD_CHINESE: "cp950",
    CharSet.MAC_ARABIC: "mac_arabic",
    CharSet.MAC_GREEK: "mac_greek",
    CharSet.MAC_CYRILLIC: "mac_cyrillic",
    CharSet.MAC_CENTRAL_EURO_ROMAN: "mac_latin2",
    CharSet.MAC_ICELANDIC: "mac_iceland",
    CharSet.MAC_TURKISH: "mac_turkish",
}


class CodecIssue(Enum):
    NONE = "none"
    UNKNOWN = "unknown"
    UNMAPPED = "unmapped"


def charset_from_code(code: int) -> CharSet | None:
    try:
        return CharSet(code)
    except ValueError:
        return None


def codec_for(charset: CharSet) -> str | None:
    name = _CODECS.get(charset)
    if name is None:
        return None
    try:
        codecs.lookup(name)
    except LookupError:
        return None
    return name


def resolve_codec(charset: CharSet, fallback: str) -> Tuple[str, CodecIssue]:
    """
    Pick the codec for ``charset``.

    ``UNKNOWN`` and charsets with no Python codec both use ``fallback`` but
    report different issues so callers can word their warnings.
    """
    if charset == CharSet.UNKNOWN:
        return fallback, CodecIssue.UNKNOWN
    name = codec_for(charset)
    if name is None:
        return fallback, CodecIssue.UNMAPPED
    return name, CodecIssue.NONE
