"""Terminal input collection with re-prompting on bad input."""

from __future__ import annotations
from typing import Callable

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def prompt_int(
    prompt: str,
    low: int,
    high: int,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> int:
    """
    Ask for an integer in [low, high] until one is entered.

    Malformed or out-of-range text never leaves this function; the user
    is told and asked again. EOFError from ``input_fn`` propagates.
    """
    text = input_fn(f"{prompt} Enter a value between {low} and {high}: ")
    while True:
        try:
            value = int(text.strip())
        except ValueError:
            value = None
        if value is not None and low <= value <= high:
            return value
        output("The value is not valid. Try again.")
        text = input_fn(f"{prompt} Enter a value between {low} and {high}: ")


def prompt_text(prompt: str, input_fn: InputFn = input) -> str:
    """Ask until a non-blank line is entered and return it stripped."""
    text = input_fn(prompt).strip()
    while not text:
        text = input_fn(prompt).strip()
    return text
