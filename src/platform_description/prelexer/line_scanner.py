from dataclasses import dataclass
from typing import List

from ..errors import BraceError, UnterminatedStringError
from .input_line import InputLine
from .scan_state import PreLexerState, ScanState


@dataclass
class ScannedLine:
    """One physical line after comment removal"""
    text: str
    number: int
    depth_at_start: int
    has_code: bool = False
    leading_comment: bool = False   # a block comment precedes the first code
    closes_comment: bool = False    # a comment from an earlier line ends here

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @property
    def width(self) -> int:
        return len(self.text) - len(self.text.lstrip())

class LineScanner:
    """Classifies characters of one line at a time as code, string or comment"""

    def __init__(self, path: str = "") -> None:
        self.path = path

    def scan_line(self, line: InputLine, state: PreLexerState) -> ScannedLine:
        """Strip comments from a line, updating the automaton state in place.

        Line comments are cut off. Block comments are replaced with spaces so
        following code keeps its column; whatever part of a block comment
        runs to the end of the line is dropped instead.
        """
        content = line.text
        result: List[str] = []
        scanned = ScannedLine(
            text="",
            number=line.number,
            depth_at_start=state.bracket_depth
        )
        started_in_comment = state.in_block_comment
        comment_start = 0
        i = 0

        while i < len(content):
            char = content[i]

            if state.scan_state == ScanState.IN_BLOCK_COMMENT:
                if content[i:i+2] == '*/':
                    result.extend('  ')
                    state.scan_state = ScanState.CODE
                    state.comment_line = None
                    if started_in_comment and not scanned.has_code:
                        scanned.closes_comment = True
                    i += 2
                    continue
                result.append(' ')
                i += 1
                continue

            if state.scan_state == ScanState.IN_STRING:
                result.append(char)
                if char == '\\' and i + 1 < len(content):
                    result.append(content[i+1])
                    i += 2
                    continue
                if char == '"':
                    state.scan_state = ScanState.CODE
                i += 1
                continue

            if char == '\\' and i + 1 < len(content):
                # escaped character never opens a string, comment or bracket
                result.append(char)
                result.append(content[i+1])
                scanned.has_code = True
                i += 2
                continue
            if content[i:i+2] == '//':
                state.scan_state = ScanState.IN_LINE_COMMENT
                break
            if content[i:i+2] == '/*':
                if not scanned.has_code:
                    scanned.leading_comment = True
                state.scan_state = ScanState.IN_BLOCK_COMMENT
                state.comment_line = line.number
                comment_start = len(result)
                result.extend('  ')
                i += 2
                continue

            if char == '"':
                state.scan_state = ScanState.IN_STRING
            elif char == '{':
                state.bracket_depth += 1
            elif char == '}':
                if state.bracket_depth == 0:
                    raise BraceError(
                        f"Unmatched closing bracket at column {i + 1}",
                        line.number, self.path
                    )
                state.bracket_depth -= 1

            if not char.isspace():
                scanned.has_code = True
            result.append(char)
            i += 1

        if state.scan_state == ScanState.IN_STRING:
            raise UnterminatedStringError(
                "Unterminated string literal", line.number, self.path
            )
        if state.scan_state == ScanState.IN_LINE_COMMENT:
            state.scan_state = ScanState.CODE
        elif state.scan_state == ScanState.IN_BLOCK_COMMENT:
            # nothing after an unclosed comment needs its column kept
            del result[comment_start:]

        if started_in_comment and not scanned.has_code:
            scanned.text = ""
        else:
            scanned.text = ''.join(result)
        return scanned
