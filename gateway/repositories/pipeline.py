"""
Precondition cascade for composite operations (update, delete, delete image).
Each step is awaited in order; the first step that returns a result ends the run.
"""

from collections.abc import Awaitable, Callable

from gateway.schemas.result import OperationResult

Step = Callable[[], Awaitable[OperationResult | None]]


async def run_pipeline(*steps: Step) -> OperationResult | None:
    """Run steps sequentially. Returns the terminating result, or None when all passed."""
    for step in steps:
        outcome = await step()
        if outcome is not None:
            return outcome
    return None
