"""Theme models: colours and the token category style table.

The theme is built once at startup (``Theme.from_config``) and handed to the
code block renderer, the page templates and the terminal widgets. All models
are frozen so one instance can be shared without copying.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field
from rich.style import Style


PLAIN = "plain"


class ThemeColors(BaseModel):
    """Site palette."""

    primary: str = Field(default="#b7410e", description="Accent colour (links, rules, comment badges)")
    bg: str = Field(default="#ffffff", description="Page background")
    background_color: str = Field(default="#fbf7f0", description="Code block background")
    text: str = Field(default="#2b2b2b", description="Body text colour")

    model_config = {"frozen": True}


class TokenStyle(BaseModel):
    """Visual style for one token category."""

    font_weight: Optional[Literal["normal", "bold"]] = None
    font_style: Optional[Literal["normal", "italic"]] = None
    text_decoration: Optional[Literal["underline", "line-through"]] = None
    opacity: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    color: Optional[str] = None
    background_color: Optional[str] = None

    model_config = {"frozen": True}

    def merge(self, other: "TokenStyle") -> "TokenStyle":
        """Return a style with every field set on ``other`` taking precedence."""
        updates = other.model_dump(exclude_none=True)
        if not updates:
            return self
        return self.model_copy(update=updates)

    def to_css(self) -> str:
        """Render as an inline CSS declaration list ("" when unstyled)."""
        declarations = []
        if self.color:
            declarations.append(f"color: {self.color}")
        if self.background_color:
            declarations.append(f"background-color: {self.background_color}")
        if self.font_weight:
            declarations.append(f"font-weight: {self.font_weight}")
        if self.font_style:
            declarations.append(f"font-style: {self.font_style}")
        if self.text_decoration:
            declarations.append(f"text-decoration: {self.text_decoration}")
        if self.opacity is not None:
            declarations.append(f"opacity: {self.opacity:g}")
        return "; ".join(declarations)

    def to_rich(self) -> Style:
        """Approximate the style for terminal rendering.

        Terminals have no opacity, so anything below 1.0 is rendered dim.
        """
        return Style(
            color=self.color,
            bgcolor=self.background_color,
            bold=True if self.font_weight == "bold" else None,
            italic=True if self.font_style == "italic" else None,
            underline=True if self.text_decoration == "underline" else None,
            strike=True if self.text_decoration == "line-through" else None,
            dim=True if self.opacity is not None and self.opacity < 1.0 else None,
        )


def _default_rules(colors: ThemeColors) -> list[tuple[tuple[str, ...], TokenStyle]]:
    # Later rules merge over earlier ones for the same category.
    return [
        (("atom",), TokenStyle(font_weight="bold")),
        (("prolog", "doctype", "cdata", "punctuation"), TokenStyle(opacity=0.7)),
        (
            ("comment",),
            TokenStyle(
                opacity=0.7,
                color=colors.bg,
                background_color=colors.primary,
                font_weight="bold",
                text_decoration="underline",
            ),
        ),
        (("namespace",), TokenStyle(opacity=0.7)),
        (("tag", "operator", "number"), TokenStyle(opacity=0.7)),
        (("property", "function"), TokenStyle(font_weight="bold", opacity=0.7)),
        (("tag-id", "selector", "atrule-id"), TokenStyle()),
        (("attr-name",), TokenStyle()),
        (
            (
                "boolean", "string", "entity", "url", "attr-value", "control",
                "directive", "unit", "statement", "regex", "at-rule",
            ),
            TokenStyle(font_weight="bold"),
        ),
        (("placeholder", "variable", "builtin", "keyword"), TokenStyle(font_style="italic")),
        (("keyword",), TokenStyle(opacity=0.7)),
        (("deleted",), TokenStyle(text_decoration="line-through")),
        (("inserted",), TokenStyle(text_decoration="underline")),
        (("italic",), TokenStyle(font_style="italic")),
        (("important", "bold"), TokenStyle(font_weight="bold")),
        (("important",), TokenStyle()),
    ]


class Theme(BaseModel):
    """Immutable theme: palette, plain style and category → style table."""

    colors: ThemeColors = Field(default_factory=ThemeColors)
    plain: TokenStyle = Field(default_factory=TokenStyle)
    styles: dict[str, TokenStyle] = Field(default_factory=dict)
    phone_breakpoint: str = "600px"

    model_config = {"frozen": True}

    @classmethod
    def default(cls, colors: Optional[ThemeColors] = None) -> "Theme":
        """Build the stock theme for a palette."""
        colors = colors or ThemeColors()
        styles: dict[str, TokenStyle] = {}
        for categories, style in _default_rules(colors):
            for category in categories:
                styles[category] = styles.get(category, TokenStyle()).merge(style)
        return cls(
            colors=colors,
            plain=TokenStyle(background_color=colors.background_color),
            styles=styles,
        )

    @classmethod
    def from_config(cls, theme_config) -> "Theme":
        """Build the theme from the ``theme`` configuration section.

        Args:
            theme_config: ThemeConfig with palette and per-category overrides

        Returns:
            Default theme for the configured palette with overrides merged in
        """
        theme = cls.default(theme_config.colors)
        if not theme_config.styles:
            return theme
        styles = dict(theme.styles)
        for category, override in theme_config.styles.items():
            styles[category] = styles.get(category, TokenStyle()).merge(override)
        return theme.model_copy(update={"styles": styles})

    def style_for(self, category: str) -> TokenStyle:
        """Look up a category's style, falling back to the unstyled default."""
        return self.styles.get(category, TokenStyle())


def transparentize(color: str, amount: float) -> str:
    """Reduce the opacity of a hex colour by ``amount`` (0.0-1.0).

    Example:
        >>> transparentize("#ff0000", 0.666)
        'rgba(255,0,0,0.334)'
    """
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    red, green, blue = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    alpha = round(max(0.0, min(1.0, 1.0 - amount)), 3)
    return f"rgba({red},{green},{blue},{alpha:g})"
