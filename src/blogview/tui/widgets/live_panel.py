"""LivePanel widget: editor, error and preview regions for a live code block.

Each edit of the editor schedules an evaluation in a worker. Workers share
one exclusive group per panel, so a new edit cancels the pending one, and
the session's generation check drops any result that still slips through.
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Static, TextArea
import structlog

from blogview.live.evaluator import Evaluator
from blogview.live.session import LiveSession
from blogview.models.code_block import LiveCodeBlock
from blogview.models.live_state import LiveStatus

logger = structlog.get_logger()

EVALUATION_GROUP = "live-evaluation"

# Fence names that TextArea knows under another name
EDITOR_LANGUAGE_ALIASES = {"py": "python", "python3": "python"}


class LiveEditor(TextArea):
    """Multi-line editor bound to a live panel's current text."""

    def __init__(self, text: str, *args, **kwargs):
        """Initialize LiveEditor with the seed text."""
        super().__init__(text, *args, **kwargs)
        self.show_line_numbers = False

    def highlight_as(self, language: str) -> bool:
        """Enable syntax highlighting when Textual knows ``language``.

        Returns:
            True if highlighting was enabled
        """
        name = EDITOR_LANGUAGE_ALIASES.get(language, language)
        if name not in self.available_languages:
            return False
        self.language = name
        return True


class LivePanel(Vertical):
    """Editable, evaluable code block."""

    DEFAULT_CSS = """
    LivePanel {
        height: auto;
        margin: 1 0;
        border: round $accent;
        border-title-align: right;
    }

    LivePanel LiveEditor {
        height: auto;
        max-height: 20;
        border: solid $panel;
    }

    LivePanel LiveEditor:focus {
        border: heavy $accent;
    }

    LivePanel .live-error {
        height: auto;
        color: $error;
        padding: 0 1;
    }

    LivePanel .live-preview {
        height: auto;
        padding: 0 1;
        border-top: dashed $accent;
    }
    """

    class Evaluated(Message):
        """Posted after an evaluation result was applied to the panel."""

        def __init__(self, panel: "LivePanel") -> None:
            super().__init__()
            self.panel = panel

    def __init__(
        self,
        block: LiveCodeBlock,
        evaluator: Evaluator,
        evaluate_on_mount: bool = True,
        **kwargs
    ):
        """Initialize LivePanel.

        Args:
            block: Live code block to mount
            evaluator: Evaluator run on every edit
            evaluate_on_mount: Evaluate the seed text once when mounted
        """
        super().__init__(**kwargs)
        self.block = block
        self.evaluator = evaluator
        self.evaluate_on_mount = evaluate_on_mount
        self.session: Optional[LiveSession] = None
        self.error_text = ""
        self.preview_text = ""

    def compose(self) -> ComposeResult:
        """Compose editor, error and preview regions."""
        yield LiveEditor(self.block.source_text, classes="live-editor")
        yield Static("", classes="live-error", markup=False)
        yield Static("", classes="live-preview", markup=False)

    def on_mount(self) -> None:
        """Create the session (seeded from the block) and show initial state."""
        self.session = LiveSession(self.block, self.evaluator)
        self.query_one(LiveEditor).highlight_as(self.block.language)
        self.border_title = f"{self.block.language} · live"
        self._refresh_regions()
        if self.evaluate_on_mount:
            self._schedule(self.session.start())

    @property
    def status(self) -> Optional[LiveStatus]:
        return self.session.state.status if self.session else None

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Schedule evaluation of the edited text."""
        event.stop()
        if self.session is None:
            return
        text = event.text_area.text
        if text == self.session.current_text:
            return
        self._schedule(self.session.edit(text))

    def _schedule(self, generation: int) -> None:
        self._refresh_regions()
        self.run_worker(
            self._evaluate(generation),
            name=f"live_evaluation_{generation}",
            group=EVALUATION_GROUP,
            exclusive=True,
            exit_on_error=False,
        )

    async def _evaluate(self, generation: int) -> None:
        if await self.session.evaluate(generation):
            self._refresh_regions()
            self.post_message(self.Evaluated(self))

    def _refresh_regions(self) -> None:
        state = self.session.state
        self.error_text = state.error_display
        self.preview_text = state.preview_display

        error = self.query_one(".live-error", Static)
        error.update(self.error_text)
        error.display = bool(self.error_text)
        self.query_one(".live-preview", Static).update(self.preview_text)

        if state.status == LiveStatus.EVALUATING:
            self.border_subtitle = "evaluating…"
        elif state.status == LiveStatus.ERRORED:
            self.border_subtitle = "error"
        else:
            self.border_subtitle = ""
