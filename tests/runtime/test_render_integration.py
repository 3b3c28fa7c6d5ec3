"""
End-to-end rendering through ScopeManager, OutputCapture and ProcessorRunner.

A minimal depth-first renderer drives begin/end for every element with
processors and renders child content through the execution context, the
way generated page code would.
"""

from dataclasses import dataclass, field
from typing import Any, List, Union

import pytest

from tagscope.runtime.capture import OutputCapture
from tagscope.runtime.processor import ElementProcessor, ProcessorRunner
from tagscope.runtime.render_scope import RenderScope, require_scope_manager
from tagscope.runtime.types import ElementOutput


@dataclass
class Element:
    tag_name: str
    attributes: List[tuple] = field(default_factory=list)
    children: List[Union["Element", str]] = field(default_factory=list)
    processors: List[Any] = field(default_factory=list)


class Renderer:
    def __init__(self) -> None:
        self.sink = OutputCapture()
        self.runner = ProcessorRunner()
        self._next_id = 0

    async def render(self, root: Element) -> str:
        async with RenderScope():
            await self._render_node(root)
        return self.sink.getvalue()

    async def _render_children(self, element: Element) -> None:
        for child in element.children:
            await self._render_node(child)

    async def _render_node(self, node: Union[Element, str]) -> None:
        if isinstance(node, str):
            self.sink.write(node)
            return

        if not node.processors:
            self.sink.write(f"<{node.tag_name}>")
            await self._render_children(node)
            self.sink.write(f"</{node.tag_name}>")
            return

        self._next_id += 1
        manager = require_scope_manager()
        context = manager.begin(
            node.tag_name,
            f"el-{self._next_id}",
            lambda: self._render_children(node),
            self.sink.start_capture,
            self.sink.end_capture,
        )
        for name, value in node.attributes:
            context.record_raw_attribute(name, value)
        for processor in node.processors:
            context.add_processor(processor)

        output = await self.runner.run(context)
        # Unset content defaults to the rendered children unless the tag is dropped
        if (
            output.tag_name is not None
            and not output.content
            and not context.has_resolved_child_content()
        ):
            output.content = await context.resolve_child_content()
        self._write_output(output)
        manager.end()

    def _write_output(self, output: ElementOutput) -> None:
        self.sink.write(output.pre_content)
        if output.tag_name is not None:
            attributes = "".join(f' {k}="{v}"' for k, v in output.attributes.items())
            self.sink.write(f"<{output.tag_name}{attributes}>")
        self.sink.write(output.content)
        if output.tag_name is not None:
            self.sink.write(f"</{output.tag_name}>")
        self.sink.write(output.post_content)


class ThemeProvider(ElementProcessor):
    def __init__(self, theme: str):
        self.theme = theme

    async def process(self, context, output):
        context.items["theme"] = self.theme


class ThemedButton(ElementProcessor):
    async def process(self, context, output):
        output.tag_name = "button"
        output.attributes["class"] = f"btn-{context.items.get('theme', 'plain')}"


class Shout(ElementProcessor):
    async def process(self, context, output):
        output.content = (await context.get_child_content()).upper() + "!"


class CountingSection(ElementProcessor):
    def __init__(self):
        self.renders = 0

    async def process(self, context, output):
        self.renders += 1
        first = await context.get_child_content()
        second = await context.get_child_content()
        assert first is second
        output.content = first


class Hidden(ElementProcessor):
    async def process(self, context, output):
        output.suppress_output()


@pytest.mark.asyncio
async def test_inherited_items_flow_to_descendants_only():
    tree = Element(
        "div",
        children=[
            Element("theme", processors=[ThemeProvider("dark")], children=[
                Element("btn", processors=[ThemedButton()], children=["Save"]),
            ]),
            Element("btn", processors=[ThemedButton()], children=["Cancel"]),
        ],
    )

    html = await Renderer().render(tree)

    assert html == (
        '<div><theme><button class="btn-dark">Save</button></theme>'
        '<button class="btn-plain">Cancel</button></div>'
    )


@pytest.mark.asyncio
async def test_nested_override_does_not_leak_to_outer_siblings():
    tree = Element("theme", processors=[ThemeProvider("dark")], children=[
        Element("theme", processors=[ThemeProvider("light")], children=[
            Element("btn", processors=[ThemedButton()], children=["A"]),
        ]),
        Element("btn", processors=[ThemedButton()], children=["B"]),
    ])

    html = await Renderer().render(tree)

    assert '<button class="btn-light">A</button>' in html
    assert '<button class="btn-dark">B</button>' in html


@pytest.mark.asyncio
async def test_child_content_is_captured_and_transformed():
    tree = Element("p", attributes=[("id", "greeting")], processors=[Shout()], children=[
        "hello ",
        Element("em", children=["world"]),
    ])

    html = await Renderer().render(tree)

    assert html == '<p id="greeting">HELLO <EM>WORLD</EM>!</p>'


@pytest.mark.asyncio
async def test_child_content_rendered_once_with_nested_scopes():
    section = CountingSection()
    inner = Element("span", processors=[Shout()], children=["inner"])
    tree = Element("section", processors=[section], children=[inner])

    renderer = Renderer()
    html = await renderer.render(tree)

    assert section.renders == 1
    assert html == "<section><span>INNER!</span></section>"
    assert renderer.sink.depth == 0


@pytest.mark.asyncio
async def test_suppressed_element_renders_nothing():
    tree = Element("div", children=[
        Element("secret", processors=[Hidden()], children=["hidden"]),
        "visible",
    ])

    html = await Renderer().render(tree)

    assert html == "<div>visible</div>"
