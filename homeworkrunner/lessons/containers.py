"""Lessons on maps, lists, ownership of values and optional values."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping, Sequence
from enum import Enum


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket holding at least three kinds of fruit and five fruits in all."""
    return {"banana": 2, "apple": 2, "orange": 2}


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add three of every fruit kind that is not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 3)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: Iterable[int]) -> list[int]:
    """Every value doubled."""
    return [value * 2 for value in values]


def fill_vec(values: Iterable[int] = ()) -> list[int]:
    """A new list of the given values followed by 22, 44 and 66."""
    return [*values, 22, 44, 66]


def add_twice(start: int) -> int:
    """Add 100 and then 1000 to start, one change after the other."""
    value = start
    value += 100
    value += 1000
    return value


def get_char(data: str) -> str:
    """The last character of data."""
    if not data:
        raise ValueError("cannot take the last character of an empty string")
    return data[-1]


def string_uppercase(data: str) -> str:
    return data.upper()


def option_numbers() -> list[int | None]:
    """Five slots, each filled with ((i * 1235) + 2) // 64."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def drain_optionals(values: Sequence[int | None]) -> list[int]:
    """Take values from the end until the sequence is empty or a None is met."""
    drained = []
    for value in reversed(values):
        if value is None:
            break
        drained.append(value)
    return drained