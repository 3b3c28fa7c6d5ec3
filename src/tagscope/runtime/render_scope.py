"""
Per-render binding of a ScopeManager.

A `RenderScope` creates a fresh `ScopeManager` and binds it to a context
variable for the duration of a render, so concurrent renders running as
separate tasks never share a stack.
"""

from __future__ import annotations

import contextvars
from typing import Optional

from tagscope.config.logging_config import get_logger
from tagscope.runtime.scope_manager import ScopeManager

log = get_logger(__name__)

_current_manager: contextvars.ContextVar[Optional[ScopeManager]] = contextvars.ContextVar(
    "_current_manager", default=None
)


def require_scope_manager() -> ScopeManager:
    """Get the scope manager of the current render or raise if none is bound.

    Raises:
        RuntimeError: If no render scope is currently bound
    """
    manager = _current_manager.get()
    if manager is None:
        raise RuntimeError("No RenderScope is currently bound")
    return manager


def maybe_scope_manager() -> Optional[ScopeManager]:
    """Get the scope manager of the current render or None if not bound."""
    return _current_manager.get()


class RenderScope:
    """Binds a dedicated ScopeManager for one render.

    Usable as a sync or async context manager. Nested scopes restore the
    outer binding on exit.
    """

    def __init__(self) -> None:
        self.manager = ScopeManager()
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> ScopeManager:
        self._token = _current_manager.set(self.manager)
        return self.manager

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None and self.manager.depth:
            log.warning(
                "Render finished with %d unclosed scope(s): %r",
                self.manager.depth,
                self.manager,
            )
        if self._token is not None:
            _current_manager.reset(self._token)
            self._token = None

    async def __aenter__(self) -> ScopeManager:
        return self.__enter__()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)
