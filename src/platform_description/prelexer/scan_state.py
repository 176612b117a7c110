from enum import Enum
from typing import Optional

from .indentation import IndentationTracker


class ScanState(Enum):
    CODE = "code"
    IN_STRING = "string"
    IN_LINE_COMMENT = "line_comment"
    IN_BLOCK_COMMENT = "block_comment"


class PreLexerState:
    """Cross-line automaton state owned by a single prelexing run.

    Only ``IN_BLOCK_COMMENT`` may be carried from one line into the next;
    bracket depth and the indentation stack always are.
    """

    def __init__(self, path: str = "") -> None:
        self.scan_state = ScanState.CODE
        self.bracket_depth = 0
        self.comment_line: Optional[int] = None  # where the open block comment began
        self.indentation = IndentationTracker(path)

    @property
    def in_block_comment(self) -> bool:
        return self.scan_state == ScanState.IN_BLOCK_COMMENT
