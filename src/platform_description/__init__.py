"""Prelexer for the indentation-based platform description language."""

from .config import PreLexerConfig
from .errors import (
    ParsingError,
    ParsingErrorKind,
    PreLexerSyntaxError,
    UnterminatedStringError,
    UnterminatedCommentError,
    CommentPlacementError,
    BraceError,
    WrongIndentError
)
from .prelexer import InputLine, PreLexer, process, process_text

__all__ = [
    'PreLexerConfig',
    'ParsingError',
    'ParsingErrorKind',
    'PreLexerSyntaxError',
    'UnterminatedStringError',
    'UnterminatedCommentError',
    'CommentPlacementError',
    'BraceError',
    'WrongIndentError',
    'InputLine',
    'PreLexer',
    'process',
    'process_text'
]
