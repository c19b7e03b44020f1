from __future__ import annotations


def format_position(position: int | None) -> str:
    if position is None:
        return "unknown position"
    return f"{position}(0x{position:x})"


class CDXDecodeError(Exception):
    """Base class for every hard decoding failure; carries the stream position."""

    def __init__(self, message: str, position: int | None = None) -> None:
        self.message = message
        self.position = position
        super().__init__(f"{message} at {format_position(position)}")


class SizeMismatchError(CDXDecodeError):
    pass


class PropertyValueError(CDXDecodeError):
    pass


class ReferenceResolutionError(CDXDecodeError):
    pass


class UnresolvedReferenceError(ReferenceResolutionError):
    def __init__(self, ref_id: int, position: int | None = None) -> None:
        self.ref_id = ref_id
        super().__init__(f"unresolved object reference {ref_id}", position)


class TypeMismatchError(ReferenceResolutionError):
    def __init__(self, ref_id: int, expected: type, actual: type, position: int | None = None) -> None:
        self.ref_id = ref_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"object reference {ref_id} is {actual.__name__}, expected {expected.__name__}",
            position,
        )


class MissingColorError(CDXDecodeError):
    def __init__(self, index: int, position: int | None = None) -> None:
        self.index = index
        super().__init__(f"color index {index} not in color table", position)


class EnumLookupError(CDXDecodeError):
    pass


class UnknownTokenError(EnumLookupError):
    def __init__(self, table: str, token: str, position: int | None = None) -> None:
        self.table = table
        self.token = token
        super().__init__(f"unknown {table} token {token!r}", position)


class UnknownValueError(EnumLookupError):
    def __init__(self, table: str, value: object, position: int | None = None) -> None:
        self.table = table
        self.value = value
        super().__init__(f"{table} value {value!r} not recognized", position)
