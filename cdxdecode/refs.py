"""
Object id registry used to turn integer references into live handles.

The registry is filled from a fully built tree before any property is
decoded, so forward references resolve the same way as backward ones.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Type, TypeVar

from .errors import CDXDecodeError, TypeMismatchError, UnresolvedReferenceError
from .logging import WarningKind, WarningLog, get_logger
from .tree import TaggedObject

T = TypeVar("T")

logger = get_logger(__name__)


class ResolutionMode(Enum):
    RIGID = "rigid"
    LENIENT = "lenient"


class ReferenceResolver:
    def __init__(self, log: WarningLog | None = None) -> None:
        self.log = log if log is not None else WarningLog()
        self._handles: dict[int, List[object]] = {}

    @classmethod
    def from_tree(cls, root: TaggedObject, log: WarningLog | None = None) -> "ReferenceResolver":
        resolver = cls(log)
        resolver.register_tree(root)
        return resolver

    def register(self, ref_id: int, handle: object) -> None:
        if ref_id <= 0 or handle is None:
            return
        # Newest first; resolve() picks the first handle of the requested type.
        self._handles.setdefault(ref_id, []).insert(0, handle)

    def register_tree(self, root: TaggedObject) -> int:
        registered = 0
        for node in root.walk():
            if node.id > 0 and node.instance is not None:
                self.register(node.id, node.instance)
                registered += 1
        logger.debug("registered %d object handles", registered)
        return registered

    def resolve(
        self,
        ref_id: int,
        expected_type: Type[T] = object,
        mode: ResolutionMode = ResolutionMode.RIGID,
        position: int | None = None,
    ) -> T | None:
        if ref_id == 0:
            return None
        handles = self._handles.get(ref_id)
        if not handles:
            self._fail(
                UnresolvedReferenceError(ref_id, position),
                WarningKind.UNRESOLVED_REFERENCE,
                mode,
            )
            return None
        for handle in handles:
            if isinstance(handle, expected_type):
                return handle
        self._fail(
            TypeMismatchError(ref_id, expected_type, type(handles[0]), position),
            WarningKind.TYPE_MISMATCH,
            mode,
        )
        return None

    def handles(self, ref_id: int) -> List[object]:
        return list(self._handles.get(ref_id, ()))

    def _fail(self, error: CDXDecodeError, kind: WarningKind, mode: ResolutionMode) -> None:
        if mode is ResolutionMode.RIGID:
            raise error
        self.log.record(kind, error.message, error.position)

    def __contains__(self, ref_id: object) -> bool:
        return ref_id in self._handles

    def __iter__(self) -> Iterator[int]:
        return iter(self._handles)

    def __len__(self) -> int:
        return len(self._handles)
