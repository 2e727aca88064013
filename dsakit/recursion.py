"""Recursive enumeration: subsets, subsequences, keypad words, Hanoi moves."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

_KEYPAD = {
    2: "abc",
    3: "def",
    4: "ghi",
    5: "jkl",
    6: "mno",
    7: "pqrs",
    8: "tuv",
    9: "wxyz",
}


def _choose(items: Sequence[int], index: int, chosen: list[int]) -> Iterator[list[int]]:
    if index == len(items):
        yield list(chosen)
        return
    yield from _choose(items, index + 1, chosen)
    chosen.append(items[index])
    yield from _choose(items, index + 1, chosen)
    chosen.pop()


def subsets(values: Iterable[int]) -> list[list[int]]:
    """All subsets, each element left out before it is taken in."""
    return list(_choose(list(values), 0, []))


def subsets_with_first(values: Iterable[int]) -> list[list[int]]:
    """All subsets, built by putting each element before the subsets of the rest."""
    result: list[list[int]] = [[]]
    for value in reversed(list(values)):
        result = result + [[value, *rest] for rest in result]
    return result


def _with_sum(
    items: Sequence[int], index: int, remaining: int, chosen: list[int]
) -> Iterator[list[int]]:
    if remaining == 0:
        yield list(chosen)
        return
    if index == len(items) or remaining < 0:
        return
    yield from _with_sum(items, index + 1, remaining, chosen)
    chosen.append(items[index])
    yield from _with_sum(items, index + 1, remaining - items[index], chosen)
    chosen.pop()


def subsets_with_sum(values: Iterable[int], target: int) -> list[list[int]]:
    """Subsets adding up to ``target``.

    A subset stops growing as soon as it reaches the target, and a branch is
    dropped once its remainder goes negative.
    """
    return list(_with_sum(list(values), 0, target, []))


def _hanoi(disks: int, source: str, auxiliary: str, destination: str) -> Iterator[tuple[str, str]]:
    if disks == 0:
        return
    yield from _hanoi(disks - 1, source, destination, auxiliary)
    yield (source, destination)
    yield from _hanoi(disks - 1, auxiliary, source, destination)


def hanoi_moves(
    disks: int, source: str = "s", auxiliary: str = "a", destination: str = "d"
) -> list[tuple[str, str]]:
    """Moves, as (from, to) pairs, that carry ``disks`` disks to ``destination``."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    return list(_hanoi(disks, source, auxiliary, destination))


def _letters(digit: int) -> str:
    try:
        return _KEYPAD[digit]
    except KeyError:
        raise ValueError(f"digit {digit} has no letters") from None


def _check_number(number: int) -> None:
    if number < 0:
        raise ValueError("number must not be negative")


def _words_from_last(number: int, prefix: str) -> Iterator[str]:
    if number == 0:
        yield prefix
        return
    for letter in _letters(number % 10):
        yield from _words_from_last(number // 10, prefix + letter)


def keypad_words(number: int) -> list[str]:
    """Letter strings for ``number``, spelled from its last digit to its first."""
    _check_number(number)
    return list(_words_from_last(number, ""))


def keypad_words_grouped(number: int) -> list[str]:
    """Words spelled by ``number`` on a phone keypad, grouped by their last letter."""
    _check_number(number)
    if number == 0:
        return [""]
    prefixes = keypad_words_grouped(number // 10)
    return [prefix + letter for letter in _letters(number % 10) for prefix in prefixes]


def _subsequences(text: str, index: int, built: str) -> Iterator[str]:
    if index == len(text):
        yield built
        return
    yield from _subsequences(text, index + 1, built)
    yield from _subsequences(text, index + 1, built + text[index])


def subsequences(text: str) -> list[str]:
    """All subsequences of ``text``, each character left out before it is taken."""
    return list(_subsequences(text, 0, ""))


def subsequences_with_first(text: str) -> list[str]:
    """All subsequences, built by prefixing each character to those of the rest."""
    result = [""]
    for char in reversed(text):
        result = result + [char + rest for rest in result]
    return result