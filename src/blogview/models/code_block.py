"""CodeBlock model: a fenced code block, either static or live.

The variant is decided once, when the fence is read, and never changes:

    ```python            -> StaticCodeBlock
    ```python live       -> LiveCodeBlock
    ```js react-live     -> StaticCodeBlock (evaluator only speaks Python)
"""

from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from blogview.utils.logging import get_logger


logger = get_logger(__name__)

LIVE_FLAGS = frozenset({"live", "react-live"})
DEFAULT_LANGUAGE = "text"
DEFAULT_LIVE_LANGUAGES = ("python", "py", "python3")


class StaticCodeBlock(BaseModel):
    """Code block rendered with syntax highlighting only."""

    kind: Literal["static"] = "static"
    source_text: str
    language: str = DEFAULT_LANGUAGE

    model_config = {"frozen": True}

    @property
    def is_live(self) -> bool:
        return False


class LiveCodeBlock(BaseModel):
    """Code block mounted as an editor/error/preview panel."""

    kind: Literal["live"] = "live"
    source_text: str
    language: str = DEFAULT_LANGUAGE

    model_config = {"frozen": True}

    @property
    def is_live(self) -> bool:
        return True


CodeBlock = Annotated[Union[StaticCodeBlock, LiveCodeBlock], Field(discriminator="kind")]

code_block_adapter = TypeAdapter(CodeBlock)


def parse_fence_info(info: str) -> tuple[str, bool]:
    """Split a fence info string into (language, live flag).

    The first word is the language; any later word equal to ``live`` or
    ``react-live`` (optionally ``=true``) marks the block live.

    Args:
        info: Text following the opening fence, e.g. "python live"

    Returns:
        Tuple of (language, wants_live)

    Example:
        >>> parse_fence_info("jsx react-live")
        ('jsx', True)
        >>> parse_fence_info("")
        ('text', False)
    """
    words = info.split()
    if not words:
        return DEFAULT_LANGUAGE, False

    language = words[0].lower()
    wants_live = False
    for word in words[1:]:
        flag, _, value = word.partition("=")
        if flag.lower() in LIVE_FLAGS and value.strip("\"'").lower() in ("", "true"):
            wants_live = True
    return language, wants_live


def make_code_block(
    source_text: str,
    info: str,
    live_languages: Iterable[str] = (),
) -> Union[StaticCodeBlock, LiveCodeBlock]:
    """Create the CodeBlock variant for a fenced block.

    A block flagged live whose language is not in ``live_languages`` is
    created static rather than failing.

    Args:
        source_text: Raw text between the fences
        info: Fence info string
        live_languages: Languages the evaluator can run

    Returns:
        StaticCodeBlock or LiveCodeBlock
    """
    language, wants_live = parse_fence_info(info)
    return resolve_code_block(source_text, language, wants_live, live_languages)


def resolve_code_block(
    source_text: str,
    language: str,
    wants_live: bool,
    live_languages: Iterable[str] = (),
) -> Union[StaticCodeBlock, LiveCodeBlock]:
    """Pick the variant for an already-parsed language and live flag.

    Live is granted only when ``language`` is one the evaluator can run;
    otherwise the block degrades to static.
    """
    language = language.lower() if language else DEFAULT_LANGUAGE
    if wants_live:
        if language in set(live_languages):
            return LiveCodeBlock(source_text=source_text, language=language)
        logger.warning("live_block_degraded_to_static", language=language)
    return StaticCodeBlock(source_text=source_text, language=language)
