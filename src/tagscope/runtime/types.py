from typing import Any, Literal, Union

from pydantic import BaseModel, Field


class UnresolvedChildContent(BaseModel):
    """
    Child content that has not been rendered and captured yet.
    """

    type: Literal["unresolved"] = "unresolved"


class ResolvedChildContent(BaseModel):
    """
    Child content that was rendered once and captured.

    An empty `text` is a valid result, distinct from the unresolved state.
    """

    type: Literal["resolved"] = "resolved"
    text: str


ChildContentState = Union[UnresolvedChildContent, ResolvedChildContent]


class ElementOutput(BaseModel):
    """
    The output processors build for a single element.

    Attributes:
        tag_name: Tag to emit. None means only the content is emitted.
        attributes: Attributes to emit on the tag, in order.
        pre_content: Text emitted before the element.
        content: Text emitted between the start and end tags.
        post_content: Text emitted after the element.
        self_closing: Emit the tag as self-closing, without content.
    """

    tag_name: str | None
    attributes: dict[str, Any] = Field(default_factory=dict)
    pre_content: str = ""
    content: str = ""
    post_content: str = ""
    self_closing: bool = False

    def suppress_output(self) -> None:
        """Drop the tag and all content, so the element renders nothing."""
        self.tag_name = None
        self.pre_content = ""
        self.content = ""
        self.post_content = ""
