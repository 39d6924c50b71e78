# licenser:header:start
#
#   project      : Licenser
#   file         : colored_enum.py
#   file_relpath : src/licenser/core/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""String enums that carry a colorizer for terminal output.

Members keep a plain ``str`` value (so they hash, compare and serialize like
strings) and expose a yachalk-compatible colorizer through `.color`:

    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)

    print(Outcome.OK.color(Outcome.OK.value))
    ```
"""

from __future__ import annotations

from enum import Enum
from functools import cached_property
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with ``yachalk.ChalkBuilder.__call__``."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return ``args`` joined by ``sep`` and decorated for display."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and which carries a colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Create a member with value ``text`` and colorizer ``color``."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with the member."""
        return self._color

    @cached_property
    def value_length(self) -> int:
        """Length of the longest value in this enum, for aligned labels."""
        return max(len(member.value) for member in type(self))

    def colored(self) -> str:
        """Return the value decorated with the member's colorizer."""
        return self._color(self._value_)
