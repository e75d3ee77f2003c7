from __future__ import annotations

from dataclasses import dataclass, field

from assignlang.type import Type
from assignlang.util import Span


@dataclass(frozen=True)
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, default_factory=Span.default)

    def match(self, other: Type | str) -> bool:
        if isinstance(other, Type):
            return self.type == other
        return self.text == other

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Token):
            return False
        return self.text == __o.text and self.type == __o.type

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text
