"""Data models for the Problem/Objective registry."""

from dataclasses import dataclass
from enum import StrEnum


class ObjectiveType(StrEnum):
    """Objective scope."""

    GENERAL = "GENERAL"
    SPECIFIC = "SPECIFIC"


@dataclass
class Problem:
    """A research problem with a viability score."""

    code: str  # P<n>
    description: str
    viability: int

    def describe(self) -> str:
        return f"{self.code} - {self.description} - {self.viability}"


@dataclass
class Objective:
    """A research objective scored on adherence and viability."""

    code: str  # O<n>
    kind: ObjectiveType
    description: str
    adherence: int
    viability: int

    @property
    def score(self) -> int:
        return self.adherence + self.viability

    def describe(self) -> str:
        return f"{self.code} - {self.kind} - {self.description} - {self.score}"
