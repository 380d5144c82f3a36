"""Backtracking parser combinators.

Every rule is a callable ``rule(source, position) -> (new_position, value)``
that raises :class:`ParseFailure` when it does not match. Composite rules try
their parts strictly in order: :func:`alt` returns the first alternative that
matches, and :func:`opt` and :func:`many1` never fail past their first item.
A failure marked ``fatal`` is never recovered by ``alt`` or ``opt``.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from ingredient_normalizer.errors import ErrorFrame

T = TypeVar("T")

Rule = Callable[["Source", int], tuple[int, Any]]


@dataclass(frozen=True)
class ParseOptions:
    """Opt-in behavior changes; the defaults keep historical output."""

    strict_fractions: bool = False
    keep_estimates: bool = False


@dataclass(frozen=True)
class Source:
    """The text being parsed together with the options for this call."""

    text: str
    options: ParseOptions = field(default_factory=ParseOptions)


class ParseFailure(Exception):
    """A rule did not match. ``frames`` lists failed contexts, innermost first."""

    def __init__(self, frames: list[ErrorFrame], fatal: bool = False):
        super().__init__(frames[0].context if frames else "parse failure")
        self.frames = frames
        self.fatal = fatal

    @classmethod
    def expected(cls, position: int, what: str, fatal: bool = False) -> "ParseFailure":
        return cls([ErrorFrame(position, what)], fatal=fatal)

    def within(self, position: int, context: str) -> "ParseFailure":
        """Record that the failure happened inside ``context``."""
        self.frames.append(ErrorFrame(position, context))
        return self


# =============================================================================
# Primitives
# =============================================================================


def tag(literal: str) -> Rule:
    """Match ``literal`` exactly."""

    def parse(source: Source, pos: int) -> tuple[int, str]:
        if source.text.startswith(literal, pos):
            return pos + len(literal), literal
        raise ParseFailure.expected(pos, f"tag {literal!r}")

    return parse


def pattern(regex: str, expected: str) -> Rule:
    """Match a regular expression at the current position, returning the text."""
    compiled = re.compile(regex)

    def parse(source: Source, pos: int) -> tuple[int, str]:
        match = compiled.match(source.text, pos)
        if match is None:
            raise ParseFailure.expected(pos, expected)
        return match.end(), match.group(0)

    return parse


def satisfy(predicate: Callable[[str], bool], expected: str) -> Rule:
    """Match a single character accepted by ``predicate``."""

    def parse(source: Source, pos: int) -> tuple[int, str]:
        if pos < len(source.text) and predicate(source.text[pos]):
            return pos + 1, source.text[pos]
        raise ParseFailure.expected(pos, expected)

    return parse


def rest_of_line(source: Source, pos: int) -> tuple[int, str]:
    """Consume everything up to a line ending.

    A carriage return must be followed by a line feed to count as a line
    ending; a lone one is an error.
    """
    text = source.text
    end = pos
    while end < len(text) and text[end] not in "\r\n":
        end += 1
    if end < len(text) and text[end] == "\r" and not text.startswith("\r\n", end):
        raise ParseFailure.expected(end, "line ending")
    return end, text[pos:end]


space0 = pattern(r"[ \t]*", "spaces")
space1 = pattern(r"[ \t]+", "spaces")
alpha1 = pattern(r"[A-Za-z]+", "alphabetic characters")


# =============================================================================
# Combinators
# =============================================================================


def opt(rule: Rule) -> Rule:
    """Try ``rule``; on failure consume nothing and return None."""

    def parse(source: Source, pos: int) -> tuple[int, Any]:
        try:
            return rule(source, pos)
        except ParseFailure as exc:
            if exc.fatal:
                raise
            return pos, None

    return parse


def alt(*rules: Rule) -> Rule:
    """Return the result of the first rule that matches."""

    def parse(source: Source, pos: int) -> tuple[int, Any]:
        failure: ParseFailure | None = None
        for rule in rules:
            try:
                return rule(source, pos)
            except ParseFailure as exc:
                if exc.fatal:
                    raise
                failure = exc
        assert failure is not None
        raise failure

    return parse


def many1(rule: Rule) -> Rule:
    """Apply ``rule`` one or more times, collecting the values."""

    def parse(source: Source, pos: int) -> tuple[int, list[Any]]:
        pos, first = rule(source, pos)
        values = [first]
        while True:
            try:
                new_pos, value = rule(source, pos)
            except ParseFailure as exc:
                if exc.fatal:
                    raise
                return pos, values
            if new_pos == pos:
                return pos, values
            pos = new_pos
            values.append(value)

    return parse


def sequence(*rules: Rule) -> Rule:
    """Apply every rule in turn, returning a tuple of their values."""

    def parse(source: Source, pos: int) -> tuple[int, tuple[Any, ...]]:
        values = []
        for rule in rules:
            pos, value = rule(source, pos)
            values.append(value)
        return pos, tuple(values)

    return parse


def delimited(opening: Rule, rule: Rule, closing: Rule) -> Rule:
    """Match ``rule`` between two delimiters, keeping only its value."""

    def parse(source: Source, pos: int) -> tuple[int, Any]:
        pos, _ = opening(source, pos)
        pos, value = rule(source, pos)
        pos, _ = closing(source, pos)
        return pos, value

    return parse


def mapped(rule: Rule, fn: Callable[[Any], T]) -> Rule:
    """Transform the value of ``rule`` with ``fn``."""

    def parse(source: Source, pos: int) -> tuple[int, T]:
        pos, value = rule(source, pos)
        return pos, fn(value)

    return parse


def context(name: str, rule: Rule | None = None) -> Any:
    """Label failures of ``rule`` with ``name``.

    Usable as a wrapper, ``context("amount", rule)``, or as a decorator on a
    rule function, ``@context("amount")``.
    """

    def wrap(inner: Rule) -> Rule:
        def parse(source: Source, pos: int) -> tuple[int, Any]:
            try:
                return inner(source, pos)
            except ParseFailure as exc:
                raise exc.within(pos, f"in {name}")

        parse.__name__ = getattr(inner, "__name__", name)
        parse.__doc__ = inner.__doc__
        return parse

    if rule is None:
        return wrap
    return wrap(rule)
