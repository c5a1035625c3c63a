"""LiveSession: the state machine behind one live code panel.

States (see LiveStatus):

    IDLE(text) --edit--> EVALUATING(text) --ok--> SHOWN(text, output)
                                          --error--> ERRORED(text, message)
    any state --edit--> EVALUATING(text')

Every edit bumps a generation counter. An evaluation result is applied only
if no edit happened while it ran, so the displayed state always belongs to
the latest text. Superseded results are dropped, not raced into the display.
"""

import asyncio
from typing import Optional

import structlog

from blogview.live.evaluator import Evaluator
from blogview.models.code_block import LiveCodeBlock
from blogview.models.live_state import EvaluationResult, LivePanelState, LiveStatus

logger = structlog.get_logger()


class LiveSession:
    """Own the mutable state of one mounted live panel."""

    def __init__(self, block: LiveCodeBlock, evaluator: Evaluator):
        """Create the session in ``IDLE(block.source_text)``.

        Args:
            block: Live code block being mounted
            evaluator: Evaluator used for every edit
        """
        self.block = block
        self.evaluator = evaluator
        self.state = LivePanelState(status=LiveStatus.IDLE, text=block.source_text)
        self._generation = 0

    @property
    def generation(self) -> int:
        """Generation of the latest edit (0 before any)."""
        return self._generation

    @property
    def current_text(self) -> str:
        return self.state.text

    def edit(self, text: str) -> int:
        """Record an edit and move to EVALUATING.

        The previous output and error stay visible until the new result
        arrives.

        Returns:
            Generation number to pass to ``evaluate``
        """
        self._generation += 1
        self.state.text = text
        self.state.status = LiveStatus.EVALUATING
        logger.debug("live_edit", generation=self._generation, length=len(text))
        return self._generation

    def start(self) -> int:
        """Schedule evaluation of the seed text (eager mount)."""
        return self.edit(self.block.source_text)

    async def evaluate(self, generation: Optional[int] = None) -> bool:
        """Evaluate the text of ``generation`` off the event loop.

        Args:
            generation: Generation returned by ``edit``; defaults to latest

        Returns:
            True if the result was applied, False if a newer edit superseded it
        """
        if generation is None:
            generation = self._generation
        if generation != self._generation:
            logger.debug("live_evaluation_skipped", generation=generation, latest=self._generation)
            return False
        text = self.state.text
        result = await asyncio.to_thread(self.evaluator.evaluate, text)
        return self.apply(generation, result)

    async def submit(self, text: str) -> bool:
        """Edit and evaluate in one step."""
        return await self.evaluate(self.edit(text))

    def apply(self, generation: int, result: EvaluationResult) -> bool:
        """Apply a finished evaluation unless a newer edit exists.

        Returns:
            True if applied
        """
        if generation != self._generation:
            logger.debug("live_evaluation_superseded", generation=generation, latest=self._generation)
            return False

        self.state.evaluations += 1
        if result.ok:
            self.state.status = LiveStatus.SHOWN
            self.state.output = result.output or ""
            self.state.error = None
        else:
            self.state.status = LiveStatus.ERRORED
            self.state.error = result.error or "Evaluation failed"
        logger.debug("live_evaluation_applied", generation=generation, status=self.state.status.value)
        return True
