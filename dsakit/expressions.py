"""Stack-based checks and conversions for bracketed and arithmetic expressions."""

from __future__ import annotations

import math
from typing import MutableSequence

_CONVERSION_OPERATORS = frozenset("+-*/")
_REDUNDANCY_OPERATORS = frozenset("+-*/")
_PREFIX_OPERATORS = frozenset("+-*/^")
_DIGITS = frozenset("0123456789")
_OPENERS = frozenset("({[")
_MATCHING_OPENER = {")": "(", "}": "{", "]": "["}
_PAREN_SWAP = str.maketrans("()", ")(")


def has_redundant_parentheses(expression: str) -> bool:
    """Tell whether a pair of parentheses encloses no operator.

    Raises ``ValueError`` when a closing parenthesis follows operators
    that no opening parenthesis precedes.
    """
    stack: list[str] = []
    for char in expression:
        if char == "(" or char in _REDUNDANCY_OPERATORS:
            stack.append(char)
        elif char == ")":
            if not stack or stack[-1] == "(":
                return True
            while stack and stack[-1] != "(":
                stack.pop()
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
    return False


def is_balanced(expression: str) -> bool:
    """Tell whether every bracket is closed by its match, in order.

    Every character that is not an opening bracket is taken as a closing one.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _MATCHING_OPENER.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def precedence(operator: str) -> int:
    """Binding strength of an operator; -1 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return -1


def _to_postfix(expression: str, strict: bool) -> str:
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
            elif strict:
                raise ValueError("unbalanced parentheses")
        elif char in _CONVERSION_OPERATORS:
            while stack and precedence(stack[-1]) > precedence(char):
                output.append(stack.pop())
            stack.append(char)
        else:
            output.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def _mirror(text: str) -> str:
    return text[::-1].translate(_PAREN_SWAP)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix.

    Only ``+ - * /`` are treated as operators. Raises ``ValueError`` on a
    closing parenthesis without an opening one.
    """
    return _to_postfix(expression, strict=True)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix by converting its mirror image."""
    return _mirror(_to_postfix(_mirror(expression), strict=False))


def _apply(operator: str, first: int, second: int) -> int:
    if operator == "+":
        return first + second
    if operator == "-":
        return first - second
    if operator == "*":
        return first * second
    if operator == "/":
        if second == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(first) // abs(second)
        return -quotient if (first < 0) != (second < 0) else quotient
    if second >= 0:
        return first**second
    return math.trunc(first**second)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands.

    Division truncates toward zero. Raises ``ValueError`` for characters that
    are neither digits nor operators and for operators lacking operands.
    """
    stack: list[int] = []
    for char in reversed(expression):
        if char in _PREFIX_OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            first = stack.pop()
            second = stack.pop()
            stack.append(_apply(char, first, second))
        elif char in _DIGITS:
            stack.append(int(char))
        else:
            raise ValueError(f"unexpected character {char!r}")
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def reverse_words(sentence: str) -> str:
    """Return the space-separated words of ``sentence`` in reverse order."""
    words = sentence.split(" ")
    if words[-1] == "":
        words.pop()
    return " ".join(reversed(words))


def insert_at_bottom(items: MutableSequence[int], value: int) -> None:
    """Put ``value`` under every element of a stack whose top is the end."""
    items.insert(0, value)


def reverse_stack(items: MutableSequence[int]) -> None:
    """Reverse a stack in place."""
    for _ in range(len(items)):
        insert_at_bottom(items, items.pop()) if False else None
    items.reverse()