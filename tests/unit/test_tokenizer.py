"""Unit tests for the tokenizer."""

from pygments.token import Comment, Keyword, Name, String, Text

from blogview.rendering.tokenizer import Token, category_for, tokenize


class TestTokenize:
    """Test tokenize."""

    def test_deterministic(self):
        """Test identical inputs produce identical output."""
        source = "def add(a, b):\n    return a + b\n"

        assert tokenize(source, "python") == tokenize(source, "python")

    def test_unknown_language_falls_back_to_plain(self):
        """Test an unknown language yields one plain token per line."""
        assert tokenize("x = 1", "no-such-lang") == ((Token("x = 1", "plain"),),)

    def test_unknown_language_multiline(self):
        lines = tokenize("a\n\nb", "no-such-lang")

        assert lines == (
            (Token("a", "plain"),),
            (Token("", "plain"),),
            (Token("b", "plain"),),
        )

    def test_python_categories(self):
        lines = tokenize("def add(a, b):\n    return a + b", "python")

        assert len(lines) == 2
        first = lines[0]
        assert first[0] == Token("def", "keyword")
        assert Token("add", "function") in first
        assert any(token.category == "punctuation" for token in first)
        assert lines[1][0].category == "plain"
        assert Token("return", "keyword") in lines[1]
        assert Token("+", "operator") in lines[1]

    def test_line_text_is_preserved(self):
        """Test joining token contents reproduces every source line."""
        source = 'x = "hi"  # note\n\nprint(x)'
        lines = tokenize(source, "python")

        assert ["".join(t.content for t in line) for line in lines] == source.split("\n")

    def test_trailing_newline_ignored(self):
        assert len(tokenize("x = 1\n", "python")) == 1

    def test_language_name_case_insensitive(self):
        assert tokenize("x = 1", "Python") == tokenize("x = 1", "python")

    def test_empty_source(self):
        assert tokenize("", "python") == ((Token("", "plain"),),)


class TestCategoryFor:
    """Test Pygments token type mapping."""

    def test_specific_types_map_through_parents(self):
        assert category_for(Keyword.Reserved) == "keyword"
        assert category_for(Keyword.Constant) == "boolean"
        assert category_for(String.Double) == "string"
        assert category_for(Comment.Single) == "comment"
        assert category_for(Name.Builtin) == "builtin"

    def test_unmapped_types_are_plain(self):
        assert category_for(Text) == "plain"
        assert category_for(Name) == "plain"
