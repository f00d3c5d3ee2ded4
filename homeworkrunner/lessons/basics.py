"""Small lessons on functions, conditions, primitive types and strings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

_DIGIT_WORDS = (
    "ZERO", "ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN", "EIGHT", "NINE",
)


def loop_lines(num: int) -> list[str]:
    """One numbered line per loop iteration, counting from 1."""
    return [f"Loop! number {i + 1}" for i in range(num)]


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def classify_char(character: str) -> str:
    """Describe a single character as alphabetical, numerical or neither."""
    if len(character) != 1:
        raise ValueError(f"expected one character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(items: Sequence[Any]) -> str:
    if len(items) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def middle_slice(items: Sequence[Any]) -> Sequence[Any]:
    """Elements at positions 1 to 3."""
    if len(items) < 4:
        raise IndexError("need at least four elements")
    return items[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    if isinstance(age, float) and age.is_integer():
        age = int(age)
    return f"{name} is {age} years old."


def second_of(numbers: Sequence[Any]) -> Any:
    return numbers[1]


def favourite_fruits() -> Iterator[str]:
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def current_favorite_course() -> str:
    return "Solana"


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def spell_number(number: int) -> str:
    """Spell a single digit as hyphen-separated capitals, e.g. T-H-R-E-E."""
    if not 0 <= number <= 9:
        raise ValueError(f"can only spell a single digit, got {number}")
    return "-".join(_DIGIT_WORDS[number])