"""
Runtime scoping layer for element processors.

Provides the execution-context stack (ScopeManager) that opens and closes a
context per element, and the copy-on-write container through which state is
inherited from ancestor elements.
"""

from tagscope.runtime.attributes import AttributeDict
from tagscope.runtime.capture import OutputCapture
from tagscope.runtime.copy_on_write import CopyOnWriteDict
from tagscope.runtime.exceptions import (
    DuplicateAttributeError,
    ScopeError,
    UnbalancedScopeError,
)
from tagscope.runtime.execution_context import ElementExecutionContext
from tagscope.runtime.processor import ElementProcessor, ProcessorRunner
from tagscope.runtime.processor_context import ProcessorContext
from tagscope.runtime.render_scope import (
    RenderScope,
    maybe_scope_manager,
    require_scope_manager,
)
from tagscope.runtime.scope_manager import ScopeManager
from tagscope.runtime.types import (
    ChildContentState,
    ElementOutput,
    ResolvedChildContent,
    UnresolvedChildContent,
)

__all__ = [
    "AttributeDict",
    "ChildContentState",
    "CopyOnWriteDict",
    "DuplicateAttributeError",
    "ElementExecutionContext",
    "ElementOutput",
    "ElementProcessor",
    "OutputCapture",
    "ProcessorContext",
    "ProcessorRunner",
    "RenderScope",
    "ResolvedChildContent",
    "ScopeError",
    "ScopeManager",
    "UnbalancedScopeError",
    "UnresolvedChildContent",
    "maybe_scope_manager",
    "require_scope_manager",
]
