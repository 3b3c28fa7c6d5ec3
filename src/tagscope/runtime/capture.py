import io
from typing import List

from tagscope.runtime.exceptions import UnbalancedScopeError


class OutputCapture:
    """
    An ambient text sink whose active buffer can be redirected.

    Rendering code writes through `write`; `start_capture` pushes a fresh
    buffer so subsequent writes are collected separately, and `end_capture`
    pops it and returns what was written. The bound methods are suitable as
    the capture delegates of `ScopeManager.begin`.

    Example:
        sink = OutputCapture()
        sink.write("<p>")
        sink.start_capture()
        sink.write("hello")
        sink.end_capture()  # "hello"
        sink.write("</p>")
        sink.getvalue()     # "<p></p>"
    """

    def __init__(self) -> None:
        self._buffers: List[io.StringIO] = [io.StringIO()]

    @property
    def depth(self) -> int:
        """Return the number of open captures."""
        return len(self._buffers) - 1

    @property
    def writer(self) -> io.StringIO:
        return self._buffers[-1]

    def write(self, text: str) -> None:
        self._buffers[-1].write(text)

    def start_capture(self) -> None:
        self._buffers.append(io.StringIO())

    def end_capture(self) -> str:
        if len(self._buffers) == 1:
            raise UnbalancedScopeError(
                "Must call 'OutputCapture.start_capture' before calling 'OutputCapture.end_capture'."
            )
        return self._buffers.pop().getvalue()

    def getvalue(self) -> str:
        """Return everything written outside of any capture."""
        return self._buffers[0].getvalue()
