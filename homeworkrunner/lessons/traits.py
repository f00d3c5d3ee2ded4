"""Lessons on shared behaviour across types and on module visibility."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from functools import singledispatch

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_FRUITS = {"PEAR": "Pear", "APPLE": "Apple"}
_VEGGIES = {"CUCUMBER": "Cucumber", "CARROT": "Carrot"}


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    """Make a sausage from the secret recipe and announce it."""
    _get_secret_recipe()
    return "sausage!"


def snacks() -> list[str]:
    """The lines describing the chosen fruit and vegetable."""
    fruit = _FRUITS["PEAR"]
    veggie = _VEGGIES["CUCUMBER"]
    return [f"Fruit: {fruit}", f"Veggie: {veggie}"]


def seconds_since_epoch(now: datetime | None = None) -> int:
    """Whole seconds since 1970-01-01 00:00:00 UTC; naive times count as UTC."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    elapsed = now - _UNIX_EPOCH
    if elapsed < timedelta(0):
        raise ValueError("SystemTime before UNIX EPOCH!")
    return elapsed // timedelta(seconds=1)