from typing import Any, Awaitable, Callable, Mapping, MutableMapping


class ProcessorContext:
    """
    The view of an element handed to each of its processors.

    Attributes:
        all_attributes: Every attribute of the element, raw and bound.
        items: State shared with processors on descendant elements. Writes
            are visible to descendants, never to ancestors.
        unique_id: An identifier unique to the element within the render.
    """

    def __init__(
        self,
        all_attributes: Mapping[str, Any],
        items: MutableMapping[str, Any],
        unique_id: str,
        get_child_content: Callable[[], Awaitable[str]],
    ):
        self.all_attributes = all_attributes
        self.items = items
        self.unique_id = unique_id
        self._get_child_content = get_child_content

    async def get_child_content(self) -> str:
        """Render the element's child content, or return it if already rendered."""
        return await self._get_child_content()
