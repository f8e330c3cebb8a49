"""
Terminal prompt helpers.

Every helper reads whole lines, so a rejected answer is discarded entirely
before the question is asked again. End of input surfaces as EOFError for
the caller to handle.
"""

import math
import re
from typing import Optional

# Plain ASCII forms only: no digit-group underscores, no other scripts' digits.
_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def read_line(prompt: str) -> str:
    """Ask for free text; surrounding whitespace is dropped."""
    return input(prompt).strip()


def _first_token(line: str) -> Optional[str]:
    tokens = line.split()
    return tokens[0] if tokens else None


def read_int(prompt: str) -> int:
    """Ask until the first token of the answer is an integer."""
    while True:
        token = _first_token(input(prompt))
        if token is not None and _INT_PATTERN.fullmatch(token):
            return int(token)
        print("Invalid number.")


def read_float(prompt: str) -> float:
    """Ask until the first token of the answer is a finite number."""
    while True:
        token = _first_token(input(prompt))
        if token is not None and _FLOAT_PATTERN.fullmatch(token):
            value = float(token)
            if math.isfinite(value):
                return value
        print("Invalid number.")


def read_yes_no(prompt: str) -> bool:
    """Ask a y/n question; only ``y`` or ``n`` (any case) is accepted."""
    while True:
        answer = input(f"{prompt} (y/n): ").strip().lower()
        if answer == "y":
            return True
        if answer == "n":
            return False
        print("Only y or n allowed.")
