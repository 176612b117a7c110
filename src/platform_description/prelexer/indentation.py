import logging
from typing import List

from ..errors import WrongIndentError

logger = logging.getLogger(__name__)


class IndentationStack:
    """Strictly increasing indentation widths; empty means base level 0"""

    def __init__(self) -> None:
        self._widths: List[int] = []

    def __len__(self) -> int:
        return len(self._widths)

    @property
    def top(self) -> int:
        return self._widths[-1] if self._widths else 0

    def push(self, width: int) -> None:
        if width <= self.top:
            raise ValueError(f"Indentation width {width} must exceed {self.top}")
        self._widths.append(width)

    def pop_to(self, width: int, line_number: int, path: str = "") -> int:
        """Pop levels until the top matches width exactly; returns the pop count"""
        pops = 0
        while self._widths and self._widths[-1] > width:
            self._widths.pop()
            pops += 1
        if self.top != width:
            raise WrongIndentError(
                f"Dedent to width {width} does not match any enclosing level",
                line_number, path
            )
        return pops

    def clear(self) -> int:
        remaining = len(self._widths)
        self._widths = []
        return remaining


class IndentationTracker:
    """Decides the delimiter owed by the previous content line.

    Starts out awaiting a baseline: the first indentation-significant line
    must not be indented. Afterwards each line's width is compared with the
    top of the stack:

    * equal  -> ``;``
    * deeper -> ``{`` and the width is pushed
    * lower  -> one ``}`` per popped level followed by ``;``
    """

    def __init__(self, path: str = "") -> None:
        self.path = path
        self.stack = IndentationStack()
        self.awaiting_baseline = True

    def delimiter_for(self, width: int, line_number: int) -> str:
        if self.awaiting_baseline:
            if width != 0:
                raise WrongIndentError(
                    "First line must not be indented", line_number, self.path
                )
            self.awaiting_baseline = False
            return ""

        top = self.stack.top
        if width == top:
            return ";"
        if width > top:
            logger.debug(f"Indent to {width} at line {line_number}")
            self.stack.push(width)
            return "{"

        pops = self.stack.pop_to(width, line_number, self.path)
        logger.debug(f"Dedent to {width} at line {line_number} closing {pops} level(s)")
        return "}" * pops + ";"

    def flush(self) -> str:
        """Close every level still open at end of input"""
        remaining = self.stack.clear()
        if remaining:
            logger.debug(f"Closing {remaining} open level(s) at end of input")
        return "}" * remaining
