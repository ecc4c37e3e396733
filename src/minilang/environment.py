"""Lexically scoped, immutable variable environments.

An environment is a chain of frames. Each frame binds at most one name and
points at the frame it was extended from, so `extend` shares the whole parent
chain instead of copying it and never touches the receiver.
"""
from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Optional, Union

from .token_types import Tok
from .types import MlValue, MinilangUnboundIdentifier

NameLike = Union[str, Tok]


def _name_of(name: NameLike) -> str:
    if isinstance(name, Tok):
        return str(name.value)

    return name


class Environment:
    __slots__ = ("_parent", "_name", "_value")

    def __init__(self, parent: Optional[Environment] = None, name: Optional[str] = None, value: Optional[MlValue] = None):
        self._parent = parent
        self._name = name
        self._value = value

    @classmethod
    def from_bindings(cls, bindings: Mapping[str, MlValue]) -> Environment:
        env = cls()

        for name, value in bindings.items():
            env = env.extend(name, value)

        return env

    @property
    def parent(self) -> Optional[Environment]:
        return self._parent

    @property
    def depth(self) -> int:
        """Number of bindings in the chain (shadowed ones included)."""
        return sum(1 for frame in self._frames() if frame._name is not None)

    def extend(self, name: NameLike, value: MlValue) -> Environment:
        return Environment(parent=self, name=_name_of(name), value=value)

    def lookup(self, name: NameLike) -> MlValue:
        key = _name_of(name)

        for frame in self._frames():
            if frame._name == key:
                return frame._value

        raise MinilangUnboundIdentifier(key)

    def contains(self, name: NameLike) -> bool:
        key = _name_of(name)
        return any(frame._name == key for frame in self._frames())

    def names(self) -> List[str]:
        """Visible names, innermost first; shadowed bindings are skipped."""
        return list(self.visible().keys())

    def visible(self) -> Dict[str, MlValue]:
        seen: Dict[str, MlValue] = {}

        for frame in self._frames():
            if frame._name is None or frame._name in seen:
                continue

            seen[frame._name] = frame._value

        return seen

    def _frames(self) -> Iterator[Environment]:
        cur: Optional[Environment] = self

        while cur is not None:
            yield cur
            cur = cur._parent

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k}={v!r}" for k, v in self.visible().items())
        return f"Environment({pairs})"
