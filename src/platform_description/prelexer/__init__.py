from .input_line import InputLine
from .scan_state import ScanState, PreLexerState
from .line_scanner import LineScanner, ScannedLine
from .indentation import IndentationStack, IndentationTracker
from .line_emitter import LineEmitter
from .prelexer import PreLexer, process, process_text

__all__ = [
    'InputLine', 'ScanState', 'PreLexerState',
    'LineScanner', 'ScannedLine',
    'IndentationStack', 'IndentationTracker', 'LineEmitter',
    'PreLexer', 'process', 'process_text'
]
