from typing import Iterator, List, Optional


class LineEmitter:
    """Holds back the last content line until its delimiter is known.

    Blank lines that follow it are held too, so output order matches input.
    """

    def __init__(self) -> None:
        self._pending: Optional[str] = None
        self._blanks: List[str] = []

    def add_blank(self, text: str) -> Iterator[str]:
        if self._pending is None:
            yield text
        else:
            self._blanks.append(text)

    def add_content(self, text: str, delimiter: str) -> Iterator[str]:
        """Finalize the pending line with delimiter and hold text in its place"""
        yield from self._release(delimiter)
        self._pending = text

    def finish(self, delimiter: str) -> Iterator[str]:
        yield from self._release(delimiter)

    def _release(self, delimiter: str) -> Iterator[str]:
        if self._pending is not None:
            yield self._pending + delimiter
            self._pending = None
        blanks, self._blanks = self._blanks, []
        yield from blanks
