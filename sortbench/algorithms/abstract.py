"""
Abstract sorting strategy interfaces for sortbench.

Concrete strategies (insertion, shaker, merge, builtin) implement the
SortStrategy protocol so the harness can select, time and report them
uniformly. Every strategy reorders a mutable sequence in place using only the
injected "less" comparator.
"""

from __future__ import annotations

import abc
import operator
from typing import Any, Callable, MutableSequence, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

Comparator = Callable[[Any, Any], bool]
"""Strict weak ordering: ``comp(a, b)`` is True when ``a`` must precede ``b``."""

DEFAULT_COMPARATOR: Comparator = operator.lt


@runtime_checkable
class SortStrategy(Protocol):
    """
    Common interface all sorting strategies must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier used by the registry and CLI.
    description : str
        A human-friendly summary of the approach.
    output_dir_name : str
        Sub-directory of the output tree receiving this strategy's sorted datasets.
    quadratic : bool
        Whether the strategy is O(N^2) and should only see the small datasets.
    """

    name: str
    description: str
    output_dir_name: str
    quadratic: bool

    def sort(self, items: MutableSequence[Any], comp: Comparator = DEFAULT_COMPARATOR) -> None:
        """
        Reorder ``items`` in place so it is ascending per ``comp``.

        Parameters
        ----------
        items : MutableSequence
            Random-access, finite sequence. Only element positions change.
        comp : Comparator
            Strict "less" relation. Exceptions raised by it propagate.
        """
        ...


class AbstractSortStrategy(abc.ABC):
    """
    ABC helper for class-based implementations.

    Subclasses set the class attributes and implement `sort`.
    """

    name: str
    description: str
    output_dir_name: str
    quadratic: bool = False

    @abc.abstractmethod
    def sort(
        self, items: MutableSequence[Any], comp: Comparator = DEFAULT_COMPARATOR
    ) -> None:  # pragma: no cover - interface only
        """Sort the sequence in place."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


__all__ = [
    "AbstractSortStrategy",
    "Comparator",
    "DEFAULT_COMPARATOR",
    "SortStrategy",
    "T",
]
