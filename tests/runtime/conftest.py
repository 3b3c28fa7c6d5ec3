import pytest

from tagscope.runtime.capture import OutputCapture
from tagscope.runtime.execution_context import ElementExecutionContext


async def _no_child_content():
    return True


@pytest.fixture
def make_context():
    """Factory for contexts with inert child content and capture delegates."""

    def _make(
        tag_name: str = "p",
        parent=None,
        unique_id: str = "",
        execute_child_content=_no_child_content,
        start_capture=lambda: None,
        end_capture=lambda: "",
    ) -> ElementExecutionContext:
        return ElementExecutionContext(
            tag_name,
            unique_id,
            execute_child_content,
            start_capture,
            end_capture,
            parent=parent,
        )

    return _make


@pytest.fixture
def sink() -> OutputCapture:
    return OutputCapture()
