"""
Result types that carry values together with non-fatal messages.

Every reader in this package returns a :class:`Result`: a produced value, an
"extra" channel for content that has to float up and be attached to an
ancestor, and the warnings collected while producing them. Warnings are never
raised; they travel with the value through every combination step.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Message:
    """A non-fatal message produced while reading a document.

    Attributes:
        type: Severity, either "warning" or "error"
        message: Human-readable description
    """

    type: str
    message: str

    def __str__(self) -> str:
        return f"{self.type}: {self.message}"


def warning(message: str) -> Message:
    """Create a warning message."""
    return Message("warning", message)


def error(exception: BaseException) -> Message:
    """Create an error message from a recovered exception."""
    return Message("error", str(exception))


def _flatten(values: Iterable[Any]) -> list[Any]:
    flattened: list[Any] = []
    for value in values:
        if isinstance(value, list):
            flattened.extend(value)
        elif value is not None:
            flattened.append(value)
    return flattened


@dataclass
class Result:
    """A value with an extra-content channel and accumulated messages.

    A missing value becomes an empty list, so readers that produce nothing
    combine cleanly with readers that produce nodes.

    Attributes:
        value: A single node, a list of nodes, or any other produced value
        extra: Nodes waiting to be spliced into an ancestor's children
        messages: Warnings collected so far, in document order

    Example:
        >>> combined = Result.combine([Result("a"), Result(["b", "c"])])
        >>> combined.value
        ['a', 'b', 'c']
    """

    value: Any = None
    extra: list[Any] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.value is None:
            self.value = []
        self.extra = list(self.extra or [])
        self.messages = list(self.messages or [])

    @classmethod
    def empty(cls, messages: Iterable[Message] | None = None) -> Result:
        """Create a result with no value, optionally carrying messages."""
        return cls(None, None, list(messages or []))

    @property
    def nodes(self) -> list[Any]:
        """The value as a list, whether it holds one node or many."""
        return _flatten([self.value])

    def map(self, func: Callable[[Any], Any]) -> Result:
        """Transform the value, keeping extras and messages."""
        return Result(func(self.value), self.extra, self.messages)

    def flat_map(self, func: Callable[[Any], Result]) -> Result:
        """Chain a dependent read, concatenating extras and messages."""
        other = func(self.value)
        return Result(
            other.value,
            self.extra + other.extra,
            self.messages + other.messages,
        )

    def to_extra(self) -> Result:
        """Demote the value into the extra channel."""
        return Result(None, self.extra + self.nodes, self.messages)

    def insert_extra(self) -> Result:
        """Promote pending extra content, appending it after the value."""
        if not self.extra:
            return self
        return Result(self.nodes + self.extra, None, self.messages)

    @staticmethod
    def map_both(first: Result, second: Result, func: Callable[[Any, Any], Any]) -> Result:
        """Combine two independent results with a binary function.

        Extras and messages from ``first`` come before those from ``second``.
        """
        return Result(
            func(first.value, second.value),
            first.extra + second.extra,
            first.messages + second.messages,
        )

    @staticmethod
    def combine(results: Iterable[Result]) -> Result:
        """Merge a sequence of results, preserving order.

        Values are flattened one level, so a result holding a list contributes
        its items and a result holding a single node contributes that node.
        """
        results = list(results)
        return Result(
            _flatten(result.value for result in results),
            _flatten(result.extra for result in results),
            [message for result in results for message in result.messages],
        )
