"""Tests for the word tokenizer."""

from httpspell.services.tokenizer import WORD_SEPARATOR, tokenize


class TestTokenize:
    """Tests for tokenize()."""

    def test_splits_on_punctuation_and_spaces(self):
        """Should split on runs of separators and keep the trailing empty token."""
        assert tokenize("foo, bar!") == ["foo", "bar", ""]

    def test_empty_text(self):
        """Should return a single empty token for empty text."""
        assert tokenize("") == [""]

    def test_whitespace_only(self):
        """Whitespace-only text splits into two empty tokens."""
        assert tokenize("   ") == ["", ""]

    def test_leading_separator(self):
        """Should keep a leading empty token."""
        assert tokenize(" hello") == ["", "hello"]

    def test_hangul_words(self):
        """Hangul syllables are word characters."""
        assert tokenize("안녕 하세요") == ["안녕", "하세요"]

    def test_mixed_scripts(self):
        """Latin and Hangul words in one text."""
        assert tokenize("hello,안녕.world") == ["hello", "안녕", "world"]

    def test_digits_and_underscore_are_word_characters(self):
        assert tokenize("snake_case 42") == ["snake_case", "42"]

    def test_non_ascii_letters_separate_words(self):
        """Only ASCII letters count as word characters outside Hangul."""
        assert tokenize("café") == ["caf", ""]
        assert tokenize("Straße") == ["Stra", "e"]

    def test_hangul_jamo_separate_words(self):
        """Compatibility jamo lie outside the syllable block."""
        assert tokenize("ㅋㅋ") == ["", ""]

    def test_no_trimming_or_deduplication(self):
        assert tokenize("a a  a") == ["a", "a", "a"]

    def test_single_word(self):
        assert tokenize("word") == ["word"]


class TestWordSeparator:
    """Tests for the separator pattern."""

    def test_matches_runs(self):
        match = WORD_SEPARATOR.search("foo ,;- bar")
        assert match is not None
        assert match.group() == " ,;- "

    def test_does_not_match_hangul_boundaries(self):
        assert WORD_SEPARATOR.search("가힣") is None
