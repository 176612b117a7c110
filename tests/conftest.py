import pytest
import logging
from typing import Callable, Dict, List, Optional, Tuple

from platform_description import PreLexer, PreLexerConfig

# Source/expected pairs for well-formed inputs
WELL_FORMED: Dict[str, Tuple[List[str], List[str]]] = {
    'simple': (
        ["first line",
         "second line",
         "    first indented",
         "    second indented",
         "third line"],
        ["first line;",
         "second line{",
         "    first indented;",
         "    second indented};",
         "third line"]
    ),
    'dedent_over_blank': (
        ["first line",
         "second line",
         "    first indented",
         "    second indented",
         "",
         "third line"],
        ["first line;",
         "second line{",
         "    first indented;",
         "    second indented};",
         "",
         "third line"]
    ),
    'dedent_at_end': (
        ["first line",
         "second line",
         "    first indented"],
        ["first line;",
         "second line{",
         "    first indented}"]
    ),
    'leading_blank': (
        ["", "line1", "line2"],
        ["", "line1;", "line2"]
    ),
    'separated': (
        ["", "line1", "", "line2"],
        ["", "line1;", "", "line2"]
    ),
    'trailing_blanks': (
        ["", "line1", "line2", "", ""],
        ["", "line1;", "line2", "", ""]
    ),
    'braces': (
        ["", "line1 { ", "    line2 }"],
        ["", "line1 { ", "    line2 }"]
    ),
    'nested_close': (
        ["a", "  b", "    c", "d"],
        ["a{", "  b{", "    c}};", "d"]
    ),
    'partial_dedent': (
        ["a", "  b", "    c", "  d"],
        ["a{", "  b{", "    c};", "  d}"]
    ),
    'only_line': (
        ["onlyLine"],
        ["onlyLine"]
    ),
}

@pytest.fixture(autouse=True)
def setup_logging() -> None:
    """Configure logging for tests"""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s [%(levelname)s] %(message)s'
    )

@pytest.fixture
def prelexer() -> PreLexer:
    """PreLexer with default configuration"""
    return PreLexer()

@pytest.fixture
def run() -> Callable[..., List[str]]:
    """Prelex a list of lines and collect the whole output"""
    def _run(lines: List[str], config: Optional[PreLexerConfig] = None) -> List[str]:
        return list(PreLexer(config).process(lines))
    return _run

@pytest.fixture(params=sorted(WELL_FORMED))
def well_formed(request: pytest.FixtureRequest) -> Tuple[List[str], List[str]]:
    """Each well-formed source with its expected output"""
    return WELL_FORMED[request.param]
