from typing import Optional, Callable


class PreLexerConfig:
    def __init__(
        self,
        path: str = "",
        error_handler: Optional[Callable[[Exception], None]] = None,
        allow_leading_comments: bool = False,
        allow_midline_comment_close: bool = False
    ):
        self.path = path
        self.error_handler = error_handler
        self.allow_leading_comments = allow_leading_comments
        self.allow_midline_comment_close = allow_midline_comment_close
