"""Lightweight data models for discovered PHP declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Relation(str, Enum):
    EXTENDS = "extends"
    IMPLEMENTS = "implements"
    TRAIT = "traits"


@dataclass(frozen=True)
class Declaration:
    name: str  # fully-qualified, no leading separator
    path: str
    namespace: str
    short_name: str
    kind: str = "class"  # class | interface
    extends: str | None = None
    implements: tuple[str, ...] = field(default_factory=tuple)
    traits: tuple[str, ...] = field(default_factory=tuple)

    def related(self, relation: Relation) -> tuple[str, ...]:
        if relation is Relation.EXTENDS:
            return (self.extends,) if self.extends is not None else ()
        if relation is Relation.IMPLEMENTS:
            return self.implements
        return self.traits

    def to_dict(self) -> dict:
        return {
            "class": self.name,
            "file": self.path,
            "namespace": self.namespace,
            "short_name": self.short_name,
            "kind": self.kind,
            "extends": self.extends,
            "implements": list(self.implements),
            "traits": list(self.traits),
        }
