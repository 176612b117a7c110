import logging
from typing import Iterable, Iterator, Optional

from ..config import PreLexerConfig
from ..errors import CommentPlacementError, ParsingError, UnterminatedCommentError
from .input_line import InputLine
from .line_emitter import LineEmitter
from .line_scanner import LineScanner, ScannedLine
from .scan_state import PreLexerState


class PreLexer:
    """Converts indentation-structured source into `;`/`{`/`}` delimited lines.

    Output is produced lazily and line for line: each input line yields
    exactly one output line, so line numbers reported downstream still
    point into the original source.
    """

    def __init__(self, config: Optional[PreLexerConfig] = None):
        self._logger = logging.getLogger(__name__)
        self.config = config or PreLexerConfig()

    def process(self, lines: Iterable[str]) -> Iterator[str]:
        """Prelex lines on demand; errors are raised when iteration reaches them"""
        try:
            yield from self._generate(lines)
        except ParsingError as e:
            self._handle_error(e)
            raise

    def process_text(self, content: str) -> Iterator[str]:
        """Split content on any newline convention and prelex it"""
        content = content.replace('\r\n', '\n').replace('\r', '\n')
        return self.process(content.split('\n'))

    def _generate(self, lines: Iterable[str]) -> Iterator[str]:
        path = self.config.path
        state = PreLexerState(path)
        scanner = LineScanner(path)
        emitter = LineEmitter()
        last_number = 0

        for line in InputLine.numbered(lines):
            last_number = line.number
            scanned = scanner.scan_line(line, state)
            if scanned.is_blank:
                yield from emitter.add_blank(scanned.text)
                continue

            delimiter = ""
            if scanned.depth_at_start == 0:
                self._check_comment_placement(scanned)
                delimiter = state.indentation.delimiter_for(scanned.width, scanned.number)
            yield from emitter.add_content(scanned.text, delimiter)

        if state.in_block_comment:
            raise UnterminatedCommentError(
                f"Block comment opened at line {state.comment_line} is never closed",
                last_number, path
            )
        if state.bracket_depth:
            self._logger.debug(f"{state.bracket_depth} bracket(s) still open at end of input")
        yield from emitter.finish(state.indentation.flush())

    def _check_comment_placement(self, scanned: ScannedLine) -> None:
        if scanned.leading_comment and not self.config.allow_leading_comments:
            raise CommentPlacementError(
                "Comment may not lead an indentation-significant line",
                scanned.number, self.config.path
            )
        if scanned.closes_comment and not self.config.allow_midline_comment_close:
            raise CommentPlacementError(
                "Multi-line comment may only end before code inside brackets",
                scanned.number, self.config.path
            )

    def _handle_error(self, error: ParsingError) -> None:
        if self.config.error_handler:
            try:
                self.config.error_handler(error)
            except Exception as e:
                self._logger.error(f"Error handler failed: {e}")

        self._logger.error(f"Prelexing failed at {error.location}: {error.message}")


def process(lines: Iterable[str], config: Optional[PreLexerConfig] = None) -> Iterator[str]:
    return PreLexer(config).process(lines)


def process_text(content: str, config: Optional[PreLexerConfig] = None) -> Iterator[str]:
    return PreLexer(config).process_text(content)
