"""Custom exceptions for blogview content services."""


class ContentError(Exception):
    """Base class for errors raised while loading blog content."""


class FrontMatterError(ContentError):
    """Raised when a post's front matter is missing or invalid.

    Attributes:
        path: Path to the offending source file
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str = "Invalid front matter"):
        """Initialize FrontMatterError.

        Args:
            path: Path to the offending source file
            message: Human-readable error message
        """
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class DuplicateSlugError(ContentError):
    """Raised when two source files resolve to the same slug."""

    def __init__(self, slug: str, first: str, second: str):
        self.slug = slug
        self.first = first
        self.second = second
        super().__init__(f"Slug '{slug}' is used by both {first} and {second}")


class PostNotFoundError(ContentError, KeyError):
    """Raised when a slug does not match any loaded post."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"No post with slug '{slug}'")

    def __str__(self) -> str:
        return self.args[0]
