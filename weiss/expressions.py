"""Balanced-symbol checking, postfix evaluation and infix-to-postfix conversion."""

from __future__ import annotations

import io
import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TextIO


class Language(Enum):
    PASCAL = "pascal"
    CPP = "cpp"


_BALANCE_MAPS: dict[Language, dict[str, str]] = {
    Language.PASCAL: {"end": "begin", ")": "(", "]": "[", "}": "{"},
    Language.CPP: {"*/": "/*", ")": "(", "]": "[", "}": "{"},
}


def is_balanced(text: str, language: Language) -> bool:
    """Check that the whitespace-separated symbols of ``text`` are balanced."""
    closers = _BALANCE_MAPS[language]
    stack: list[str] = []
    for word in text.split():
        if stack and word in closers and stack[-1] == closers[word]:
            stack.pop()
        else:
            stack.append(word)
    return not stack


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def calc_postfix(expression: str) -> int:
    """Evaluate a whitespace-separated postfix expression of integers."""
    stack: list[int] = []
    for word in expression.split():
        operation = _OPERATIONS.get(word)
        if operation is None:
            try:
                stack.append(int(word))
            except ValueError:
                raise ValueError(f"Invalid expression. Not a number: {word}") from None
            continue
        if len(stack) < 2:
            raise ValueError(f"Invalid expression. Missing operand for {word}")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if len(stack) != 1:
        raise ValueError(
            "Invalid expression. Stack is not empty at the end of the expression."
        )
    return stack[0]


@dataclass(frozen=True)
class Symbol(ABC):
    """A token of an infix expression and what it does during conversion."""

    token: str
    precedence: int

    def is_open_par(self) -> bool:
        return False

    @abstractmethod
    def on_read(self, out: TextIO, stack: list[Symbol]) -> bool:
        """Handle the symbol being read; tell whether it should be pushed."""

    @abstractmethod
    def on_popped(self, out: TextIO, stack: list[Symbol]) -> None:
        """Handle the symbol being popped off the operator stack."""


class Number(Symbol):
    def on_read(self, out: TextIO, stack: list[Symbol]) -> bool:
        out.write(f"{self.token} ")
        return False

    def on_popped(self, out: TextIO, stack: list[Symbol]) -> None:
        return None


class OpenPar(Symbol):
    def is_open_par(self) -> bool:
        return True

    def on_read(self, out: TextIO, stack: list[Symbol]) -> bool:
        return True

    def on_popped(self, out: TextIO, stack: list[Symbol]) -> None:
        return None


class ClosePar(Symbol):
    def on_read(self, out: TextIO, stack: list[Symbol]) -> bool:
        while True:
            if not stack:
                raise ValueError("unbalanced parentheses")
            symbol = stack.pop()
            symbol.on_popped(out, stack)
            if symbol.is_open_par():
                return False

    def on_popped(self, out: TextIO, stack: list[Symbol]) -> None:
        return None


class Operator(Symbol):
    def on_read(self, out: TextIO, stack: list[Symbol]) -> bool:
        while stack and stack[-1].precedence >= self.precedence and not stack[-1].is_open_par():
            stack.pop().on_popped(out, stack)
        return True

    def on_popped(self, out: TextIO, stack: list[Symbol]) -> None:
        out.write(f"{self.token} ")


_SYMBOL_KINDS: dict[str, tuple[type[Symbol], int]] = {
    "+": (Operator, 1),
    "-": (Operator, 1),
    "*": (Operator, 2),
    "/": (Operator, 2),
    "^": (Operator, 3),
    "(": (OpenPar, 100),
    ")": (ClosePar, 100),
}


def symbol_factory(token: str) -> Symbol:
    """Build the symbol for a token; anything not an operator or parenthesis is a number."""
    kind, precedence = _SYMBOL_KINDS.get(token, (Number, 0))
    return kind(token, precedence)


def infix_to_postfix(expression: str) -> str:
    """Convert a whitespace-separated infix expression to postfix."""
    out = io.StringIO()
    stack: list[Symbol] = []
    for token in expression.split():
        symbol = symbol_factory(token)
        if symbol.on_read(out, stack):
            stack.append(symbol)
    while stack:
        stack.pop().on_popped(out, stack)
    return out.getvalue()