"""Evaluators for live code blocks.

A snippet runs in no-inline mode: it is compiled as a module of statements,
never as a lone expression, and produces output explicitly:

    items = [1, 2, 3]
    render(sum(items))     # preview shows "6"
    print("done")          # printed lines are shown too

A snippet that neither prints nor calls render() is an error, as is any
exception it raises. Errors are returned, never raised.
"""

import builtins
import io
from typing import Any, Protocol

from blogview.models.live_state import EvaluationResult
from blogview.utils.logging import get_logger


logger = get_logger(__name__)

NO_OUTPUT_MESSAGE = "No-inline evaluations must call render() or print()"


class Evaluator(Protocol):
    """Anything that turns source text into an EvaluationResult."""

    def evaluate(self, source_text: str) -> EvaluationResult:
        ...


class PythonEvaluator:
    """Run Python snippets with a captured print() and an injected render()."""

    filename = "<live>"

    def evaluate(self, source_text: str) -> EvaluationResult:
        """Execute ``source_text`` and collect its output.

        Args:
            source_text: Python statements

        Returns:
            EvaluationResult with the printed and rendered output, or the
            exception message on failure
        """
        buffer = io.StringIO()
        rendered: list[str] = []

        def _print(*args: Any, **kwargs: Any) -> None:
            kwargs["file"] = buffer
            builtins.print(*args, **kwargs)

        def _render(value: Any) -> None:
            rendered.append(str(value))

        namespace = {"__name__": "__live__", "print": _print, "render": _render}

        try:
            code = compile(source_text, self.filename, "exec")
            exec(code, namespace)
        except (Exception, SystemExit) as e:
            message = _error_message(e)
            logger.debug("live_evaluation_failed", error=message, error_type=type(e).__name__)
            return EvaluationResult.failure(message)

        printed = buffer.getvalue()
        if not printed and not rendered:
            return EvaluationResult.failure(NO_OUTPUT_MESSAGE)

        output = printed + "\n".join(rendered)
        logger.debug("live_evaluation_succeeded", output_length=len(output))
        return EvaluationResult.success(output.rstrip("\n"))


def _error_message(error: BaseException) -> str:
    """Message shown in the error region.

    The exception's own text, verbatim; the type name when it has none.
    """
    if isinstance(error, SyntaxError):
        location = f" (line {error.lineno})" if error.lineno else ""
        return f"SyntaxError: {error.msg}{location}"
    message = str(error)
    return message if message else type(error).__name__
