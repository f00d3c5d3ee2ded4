"""Coloured status lines for the exercise runner."""

from __future__ import annotations

import os

import click


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def warn(message: str) -> None:
    """Print a red warning line, with an emoji unless NO_EMOJI is set."""
    marker = "!" if _no_emoji() else "⚠️ "
    click.echo(f"{click.style(marker, fg='red')} {click.style(message, fg='red')}")


def success(message: str) -> None:
    """Print a green success line, with an emoji unless NO_EMOJI is set."""
    marker = "✓" if _no_emoji() else "✅"
    click.echo(f"{click.style(marker, fg='green')} {click.style(message, fg='green')}")