from typing import Callable, Optional, Sequence
import logging

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

class EndOfInput(Exception):
    """Raised when the input stream is exhausted while prompting."""

def _read(prompt: str, input_fn: InputFn) -> str:
    try:
        return input_fn(prompt)
    except EOFError:
        raise EndOfInput()

def read_string(prompt: str, input_fn: InputFn = input) -> str:
    """Prompt until a non-empty value is entered."""
    while True:
        value = _read(prompt, input_fn).strip()
        if value:
            return value

def read_int(
    prompt: str,
    minimum: int,
    maximum: int,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> int:
    """Prompt until an integer within [minimum, maximum] is entered."""
    while True:
        raw = _read(prompt, input_fn).strip()
        try:
            value = int(raw)
        except ValueError:
            value = None
        if value is not None and minimum <= value <= maximum:
            return value
        logger.debug(f"Rejected integer input {raw!r}")
        output_fn("Invalid input.")

def read_choice(
    prompt: str,
    options: Sequence[str],
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> str:
    """Prompt until one of ``options`` is entered (case-insensitive).

    Returns the option as spelled in ``options``.
    """
    lookup = {option.lower(): option for option in options}
    while True:
        choice: Optional[str] = lookup.get(read_string(prompt, input_fn).lower())
        if choice is not None:
            return choice
        output_fn("Invalid input.")
