from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class InputLine:
    """Raw source line before prelexing"""
    text: str
    number: int  # 1-based

    @classmethod
    def numbered(cls, lines: Iterable[str]) -> Iterator['InputLine']:
        """Wrap plain strings, numbering them from 1"""
        for number, text in enumerate(lines, start=1):
            yield cls(text=text, number=number)
