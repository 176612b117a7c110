"""Configuration and error handler tests"""
import pytest
from typing import Callable, List
from unittest.mock import Mock

from platform_description import (
    CommentPlacementError,
    PreLexer,
    PreLexerConfig,
    WrongIndentError
)

def test_default_config() -> None:
    config = PreLexer().config

    assert config.path == ""
    assert config.error_handler is None
    assert not config.allow_leading_comments
    assert not config.allow_midline_comment_close

def test_error_handler() -> None:
    """Test error handler configuration"""
    error_handler = Mock()
    prelexer = PreLexer(PreLexerConfig(error_handler=error_handler))

    with pytest.raises(WrongIndentError):
        list(prelexer.process(["a", "    b", "  c"]))

    assert error_handler.called
    assert isinstance(error_handler.call_args[0][0], WrongIndentError)

def test_failing_error_handler_does_not_mask_error() -> None:
    error_handler = Mock(side_effect=RuntimeError("handler broke"))
    prelexer = PreLexer(PreLexerConfig(error_handler=error_handler))

    with pytest.raises(WrongIndentError):
        list(prelexer.process(["  a"]))
    assert error_handler.call_count == 1

def test_error_handler_not_called_on_success() -> None:
    error_handler = Mock()
    prelexer = PreLexer(PreLexerConfig(error_handler=error_handler))

    assert list(prelexer.process(["a", "b"])) == ["a;", "b"]
    assert not error_handler.called

def test_allow_leading_comments(run: Callable[..., List[str]]) -> None:
    source = ["a", "  /*x*/b"]
    with pytest.raises(CommentPlacementError):
        run(source)

    result = run(source, PreLexerConfig(allow_leading_comments=True))
    assert result == ["a{", " " * 7 + "b}"]

def test_allow_midline_comment_close(run: Callable[..., List[str]]) -> None:
    source = ["a /* start", "end */ b"]
    with pytest.raises(CommentPlacementError):
        run(source)

    result = run(source, PreLexerConfig(allow_midline_comment_close=True))
    assert result == ["a {", " " * 7 + "b}"]
