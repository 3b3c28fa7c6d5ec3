"""
Per-element execution context.

An `ElementExecutionContext` is created by `ScopeManager.begin` for every
element that has processors bound to it. It collects what the processors
need while the element is active:

- the element's tag name and unique id
- the attributes recorded for the element, raw and bound
- state inherited from the enclosing element (copy-on-write)
- the processors bound to the element, in bind order
- the output slot the processors fill in
- the machinery to run, and optionally capture, the element's child content
"""

import asyncio
from contextlib import contextmanager
from typing import Any, Awaitable, Callable, Iterator, List, MutableMapping, Optional

from tagscope.config.logging_config import get_logger
from tagscope.runtime.attributes import AttributeDict
from tagscope.runtime.copy_on_write import CopyOnWriteDict
from tagscope.runtime.exceptions import DuplicateAttributeError
from tagscope.runtime.types import (
    ChildContentState,
    ElementOutput,
    ResolvedChildContent,
    UnresolvedChildContent,
)

log = get_logger(__name__)

ChildContentExecutor = Callable[[], Awaitable[Any]]
StartCapture = Callable[[], None]
EndCapture = Callable[[], str]


class _Capture:
    __slots__ = ("text",)

    def __init__(self) -> None:
        self.text: Optional[str] = None


class ElementExecutionContext:
    """
    Runtime record for one element while its processors execute.

    Attribute maps are local to the element and compare names
    case-insensitively. `items` is inherited: with a parent it is a
    copy-on-write view of the parent's items, so writes here are visible to
    descendants but never to the parent or siblings.
    """

    def __init__(
        self,
        tag_name: str,
        unique_id: str,
        execute_child_content: ChildContentExecutor,
        start_capture: StartCapture,
        end_capture: EndCapture,
        parent: Optional["ElementExecutionContext"] = None,
    ):
        self._tag_name = tag_name
        self._unique_id = unique_id
        self._execute_child_content = execute_child_content
        self._start_capture = start_capture
        self._end_capture = end_capture
        self._processors: List[Any] = []
        self._child_content: ChildContentState = UnresolvedChildContent()
        self._child_content_lock = asyncio.Lock()

        # Without an enclosing element there is nothing to inherit from.
        if parent is not None:
            self._items: MutableMapping[str, Any] = CopyOnWriteDict(parent.items)
        else:
            self._items = {}

        self._attributes_raw: AttributeDict[str] = AttributeDict(tag_name)
        self._attributes_all: AttributeDict[Any] = AttributeDict(tag_name)

        self.output: Optional[ElementOutput] = None

    @property
    def tag_name(self) -> str:
        """The element's tag name as written in the markup."""
        return self._tag_name

    @property
    def unique_id(self) -> str:
        """An identifier unique to this element within the current render."""
        return self._unique_id

    @property
    def items(self) -> MutableMapping[str, Any]:
        """State shared with processors on this element and its descendants."""
        return self._items

    @property
    def attributes_raw(self) -> AttributeDict[str]:
        """Attributes recorded as plain markup attributes."""
        return self._attributes_raw

    @property
    def attributes_all(self) -> AttributeDict[Any]:
        """Raw attributes plus attributes bound to processor properties."""
        return self._attributes_all

    @property
    def processors(self) -> tuple:
        """Processors bound to this element, in bind order."""
        return tuple(self._processors)

    @property
    def child_content(self) -> ChildContentState:
        return self._child_content

    def add_processor(self, processor: Any) -> None:
        self._processors.append(processor)

    def record_raw_attribute(self, name: str, value: str) -> None:
        """
        Track a markup attribute in both `attributes_raw` and `attributes_all`.

        Raises:
            DuplicateAttributeError: If the name is already present in
                either map, compared case-insensitively. Neither map is
                modified in that case.
        """
        if name in self._attributes_raw or name in self._attributes_all:
            raise DuplicateAttributeError(name, self._tag_name)
        self._attributes_raw.add(name, value)
        self._attributes_all.add(name, value)

    def record_bound_attribute(self, name: str, value: Any) -> None:
        """
        Track an attribute bound to a processor property in `attributes_all`.

        Raises:
            DuplicateAttributeError: If the name is already present in
                `attributes_all`, compared case-insensitively.
        """
        self._attributes_all.add(name, value)

    async def run_child_content(self) -> Any:
        """
        Execute the child content without capturing it.

        Not memoized: every call runs the whole child subtree again.
        """
        return await self._execute_child_content()

    async def resolve_child_content(self) -> str:
        """
        Execute the child content once and return the captured text.

        The first call brackets one execution with the capture delegates and
        caches the result. Later calls return the cached text without running
        anything. If execution fails the cache stays unresolved and the
        exception propagates unchanged.
        """
        async with self._child_content_lock:
            if isinstance(self._child_content, UnresolvedChildContent):
                with self._capture() as capture:
                    await self._execute_child_content()
                text = capture.text or ""
                self._child_content = ResolvedChildContent(text=text)
                log.debug(
                    "Resolved child content for <%s> (%d chars)",
                    self._tag_name,
                    len(text),
                )
            return self._child_content.text

    def has_resolved_child_content(self) -> bool:
        """Return True once `resolve_child_content` has completed."""
        return isinstance(self._child_content, ResolvedChildContent)

    @contextmanager
    def _capture(self) -> Iterator[_Capture]:
        capture = _Capture()
        self._start_capture()
        try:
            yield capture
        except BaseException:
            # Close the capture but keep the executor's exception
            try:
                self._end_capture()
            except Exception:
                log.exception("end_capture failed for <%s>", self._tag_name)
            raise
        text = self._end_capture()
        if not isinstance(text, str):
            raise TypeError(
                f"end_capture must return the captured text as str, got {type(text).__name__}"
            )
        capture.text = text

    def __repr__(self) -> str:
        return (
            f"ElementExecutionContext(tag_name={self._tag_name!r}, "
            f"unique_id={self._unique_id!r}, processors={len(self._processors)})"
        )
