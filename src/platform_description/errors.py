from enum import Enum


class ParsingErrorKind(Enum):
    SYNTAX_ERROR = "syntax error"
    WRONG_INDENT = "wrong indent"


class ParsingError(Exception):
    """Base error for prelexing failures"""
    error = ParsingErrorKind.SYNTAX_ERROR

    def __init__(self, message: str, line_number: int, path: str = "") -> None:
        self.message = message
        self.line_number = line_number
        self.path = path
        super().__init__(f"{self.location}: {message}")

    @property
    def location(self) -> str:
        if self.path:
            return f"{self.path}:{self.line_number}"
        return f"line {self.line_number}"

class PreLexerSyntaxError(ParsingError):
    """Error for malformed lexical structure"""
    error = ParsingErrorKind.SYNTAX_ERROR

class UnterminatedStringError(PreLexerSyntaxError):
    """String literal still open at end of line"""
    pass

class UnterminatedCommentError(PreLexerSyntaxError):
    """Block comment still open at end of input"""
    pass

class CommentPlacementError(PreLexerSyntaxError):
    """Comment in a position where indentation is significant"""
    pass

class BraceError(PreLexerSyntaxError):
    """Error for mismatched braces"""
    pass

class WrongIndentError(ParsingError):
    """Indentation that does not match any open level"""
    error = ParsingErrorKind.WRONG_INDENT
