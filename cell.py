import math
import re
from dataclasses import dataclass
from typing import Union


_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class Numeric:
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class Text:
    value: str


Cell = Union[Numeric, Text]


def format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def stringify(cell: Cell) -> str:
    if isinstance(cell, Numeric):
        return format_float(cell.value)
    return cell.value


def parse_user_input(text: str) -> Cell:
    """Numeric when the whole string is a float literal, Text otherwise."""
    if _FLOAT_RE.fullmatch(text):
        value = float(text)
        # overflowing literals such as 1e999 stay textual
        if math.isfinite(value):
            return Numeric(value)
    return Text(text)


def empty_cell() -> Text:
    return Text("")
