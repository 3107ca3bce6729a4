"""
Dataclasses and option enums for search term discovery.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Type, TypeVar, Union

import numpy as np

from .errors import UnsupportedOptionError


class ExtractionMethod(str, Enum):
    FAKERAKE = "fakerake"
    TAGGED = "tagged"


class ImportanceMethod(str, Enum):
    STRENGTH = "strength"
    EIGENCENTRALITY = "eigencentrality"
    ALPHA = "alpha"
    BETWEENNESS = "betweenness"
    HUB = "hub"
    POWER = "power"


class CutoffMethod(str, Enum):
    CHANGEPOINT = "changepoint"
    CUMULATIVE = "cumulative"


E = TypeVar("E", bound=Enum)


def coerce_option(enum_cls: Type[E], value: Union[E, str], kind: str) -> E:
    """
    Resolve an enum member from a member or its string value.
    Anything else raises UnsupportedOptionError.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise UnsupportedOptionError(kind, value, [m.value for m in enum_cls]) from None


@dataclass
class DocumentFeatureMatrix:
    """Documents as rows, terms as columns, non-negative integer cells."""

    values: np.ndarray
    terms: List[str]

    def __post_init__(self) -> None:
        self.values = np.asarray(self.values)
        if self.values.ndim != 2:
            raise ValueError(f"document-feature matrix must be 2-D, got {self.values.ndim}-D")
        if self.values.shape[1] != len(self.terms):
            raise ValueError(
                f"matrix has {self.values.shape[1]} columns but {len(self.terms)} terms"
            )

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape

    @property
    def n_documents(self) -> int:
        return self.values.shape[0]

    @property
    def n_terms(self) -> int:
        return self.values.shape[1]

    def column(self, term: str) -> np.ndarray:
        return self.values[:, self.terms.index(term)]


@dataclass
class ImportanceRow:
    rank: int
    importance: float
    nodename: str


@dataclass
class StudyDoc:
    title: str
    abstract: str
    keywords: str = ""

    @property
    def text(self) -> str:
        return " ".join(p for p in (self.title, self.abstract) if p)
