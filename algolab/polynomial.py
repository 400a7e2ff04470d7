"""Polynomials held as terms ordered by descending power, and their sum."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import groupby


@dataclass(frozen=True)
class Term:
    """One term ``coefficient * x^power``."""

    coefficient: float
    power: int

    def __str__(self) -> str:
        return f"{self.coefficient}x^{self.power}"


class Polynomial:
    """A polynomial whose terms are kept in descending order of power."""

    def __init__(self, terms: Iterable[Term | tuple[float, int]] = ()) -> None:
        by_power: dict[int, float] = {}
        for term in terms:
            if not isinstance(term, Term):
                term = Term(*term)
            by_power[term.power] = by_power.get(term.power, 0) + term.coefficient
        self._terms = tuple(
            Term(by_power[power], power) for power in sorted(by_power, reverse=True)
        )

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return add_polynomials(self, other)

    def __str__(self) -> str:
        return " + ".join(str(term) for term in self._terms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._terms)!r})"


def add_polynomials(first: Polynomial, second: Polynomial) -> Polynomial:
    """Merge two polynomials term by term, summing coefficients of equal powers."""
    merged = heapq.merge(first, second, key=lambda term: -term.power)
    return Polynomial(
        Term(sum(term.coefficient for term in group), power)
        for power, group in groupby(merged, key=lambda term: term.power)
    )