from typing import List, Optional

from tagscope.config.logging_config import get_logger
from tagscope.runtime.exceptions import UnbalancedScopeError
from tagscope.runtime.execution_context import (
    ChildContentExecutor,
    ElementExecutionContext,
    EndCapture,
    StartCapture,
)

log = get_logger(__name__)


class ScopeManager:
    """
    Opens and closes element execution contexts in traversal order.

    A render calls `begin` when it enters an element and `end` when it leaves
    it. The new context is always parented to whatever is currently on top of
    the stack, so nesting follows call order alone and callers never pass a
    parent explicitly.

    One manager serves one render at a time. It can be reused for further
    renders once its stack is empty again.
    """

    def __init__(self) -> None:
        self._stack: List[ElementExecutionContext] = []

    @property
    def current(self) -> Optional[ElementExecutionContext]:
        """The innermost active context, or None outside any element."""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def begin(
        self,
        tag_name: str,
        unique_id: str,
        execute_child_content: ChildContentExecutor,
        start_capture: StartCapture,
        end_capture: EndCapture,
    ) -> ElementExecutionContext:
        """
        Open a context for an element nested inside the current one.

        Returns:
            The new context, now on top of the stack.
        """
        context = ElementExecutionContext(
            tag_name,
            unique_id,
            execute_child_content,
            start_capture,
            end_capture,
            parent=self.current,
        )
        self._stack.append(context)
        log.debug("Begin <%s> id=%r depth=%d", tag_name, unique_id, len(self._stack))
        return context

    def end(self) -> Optional[ElementExecutionContext]:
        """
        Close the innermost context.

        Returns:
            The context that is now on top (the closed context's parent), or
            None if no context remains active.

        Raises:
            UnbalancedScopeError: If no context is active.
        """
        if not self._stack:
            log.error("ScopeManager.end called with no active scope")
            raise UnbalancedScopeError(
                "Must call 'ScopeManager.begin' before calling 'ScopeManager.end'."
            )

        closed = self._stack.pop()
        log.debug("End <%s> depth=%d", closed.tag_name, len(self._stack))
        return self.current

    def __repr__(self) -> str:
        tags = " > ".join(context.tag_name for context in self._stack)
        return f"ScopeManager([{tags}])"
