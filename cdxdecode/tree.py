from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from .errors import CDXDecodeError, SizeMismatchError

OBJECT_TAG_FLAG = 0x8000
FONT_TABLE_TAG = 0x0100
COLOR_TABLE_TAG = 0x0300


def is_object_tag(tag: int) -> bool:
    return bool(tag & OBJECT_TAG_FLAG)


@dataclass(frozen=True)
class Property:
    tag: int
    payload: bytes
    position: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.payload, bytes):
            object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def from_segment(cls, tag: int, length: int, data: bytes, position: int = 0) -> "Property":
        if len(data) != length:
            raise SizeMismatchError(
                f"property 0x{tag:04x} declares {length} bytes but carries {len(data)}",
                position,
            )
        return cls(tag=tag, payload=bytes(data), position=position)

    @property
    def length(self) -> int:
        return len(self.payload)


@dataclass
class TaggedObject:
    tag: int
    id: int = 0
    position: int = 0
    children: List["TaggedObject"] = field(default_factory=list)
    properties: List[Property] = field(default_factory=list)
    instance: object | None = None

    def bind(self, instance: object) -> None:
        if self.instance is not None and self.instance is not instance:
            raise CDXDecodeError(
                f"object 0x{self.tag:04x} id {self.id} is already bound to "
                f"{type(self.instance).__name__}",
                self.position,
            )
        self.instance = instance

    def add_child(self, child: "TaggedObject") -> "TaggedObject":
        self.children.append(child)
        return child

    def add_property(self, prop: Property) -> Property:
        self.properties.append(prop)
        return prop

    def walk(self) -> Iterator["TaggedObject"]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find_property(self, tag: int) -> Property | None:
        for prop in self.properties:
            if prop.tag == tag:
                return prop
        return None

    def properties_with_tag(self, tag: int) -> List[Property]:
        return [prop for prop in self.properties if prop.tag == tag]
