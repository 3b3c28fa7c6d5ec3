"""
Element processors and the runner that executes them.

Processors are bound to an element's execution context while the markup is
traversed. Once an element's attributes are recorded, the runner hands each
processor a `ProcessorContext` and the shared `ElementOutput`, in the order
the processors were bound.
"""

from abc import ABC, abstractmethod

from tagscope.config.logging_config import get_logger
from tagscope.runtime.execution_context import ElementExecutionContext
from tagscope.runtime.processor_context import ProcessorContext
from tagscope.runtime.types import ElementOutput

log = get_logger(__name__)


class ElementProcessor(ABC):
    """
    Base class for per-element behaviour.

    Subclasses implement `process`, reading from the context and writing to
    the output. A processor that needs the rendered children calls
    `context.get_child_content()`; the children are rendered at most once no
    matter how many processors on the element ask for them.
    """

    @abstractmethod
    async def process(self, context: ProcessorContext, output: ElementOutput) -> None:
        pass


class ProcessorRunner:
    """Runs the processors bound to an element and fills its output slot."""

    async def run(self, execution_context: ElementExecutionContext) -> ElementOutput:
        context = ProcessorContext(
            all_attributes=execution_context.attributes_all,
            items=execution_context.items,
            unique_id=execution_context.unique_id,
            get_child_content=execution_context.resolve_child_content,
        )
        output = ElementOutput(
            tag_name=execution_context.tag_name,
            attributes=dict(execution_context.attributes_raw.items()),
        )

        for processor in execution_context.processors:
            log.debug(
                "Running %s on <%s>",
                type(processor).__name__,
                execution_context.tag_name,
            )
            await processor.process(context, output)

        execution_context.output = output
        return output
