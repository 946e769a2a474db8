import pytest

from txtidy.core.errors import ConfigError, PatternError
from txtidy.core.patterns import match_any_glob, match_glob, validate_pattern, validate_patterns


class TestValidatePattern:
    @pytest.mark.parametrize(
        "pattern",
        ["*.txt", "?.md", "[abc].py", "[!a]*", "[]]x", "[!]]x", "[a-z]*.go", "Makefile", "a\\b", ""],
    )
    def test_valid_patterns(self, pattern):
        assert validate_pattern(pattern) == pattern

    @pytest.mark.parametrize("pattern", ["[", "*.[ch", "[]", "[!]", "ok[a]bad["])
    def test_unclosed_bracket_is_invalid(self, pattern):
        with pytest.raises(PatternError) as exc:
            validate_pattern(pattern)
        assert exc.value.pattern == pattern
        assert exc.value.code == "invalid_pattern"
        assert f"'{pattern}'" in str(exc.value)

    def test_pattern_error_is_config_error(self):
        with pytest.raises(ConfigError):
            validate_pattern("[")

    def test_validate_patterns_requires_at_least_one(self):
        with pytest.raises(PatternError) as exc:
            validate_patterns([])
        assert exc.value.code == "no_patterns"

    def test_validate_patterns_keeps_order(self):
        assert validate_patterns(["*.b", "*.a"]) == ("*.b", "*.a")


class TestMatch:
    def test_star_and_question_mark(self):
        assert match_glob("notes.txt", "*.txt")
        assert match_glob("a.md", "?.md")
        assert not match_glob("ab.md", "?.md")

    def test_bracket_classes(self):
        assert match_glob("b.py", "[abc].py")
        assert not match_glob("d.py", "[abc].py")
        assert match_glob("d.py", "[!abc].py")

    def test_case_sensitive(self):
        assert not match_glob("README.TXT", "*.txt")

    def test_pattern_with_separator_never_matches_base_name(self):
        assert not match_glob("a.txt", "sub/*.txt")

    def test_match_any(self):
        assert match_any_glob("x.md", ("*.txt", "*.md"))
        assert not match_any_glob("x.rst", ("*.txt", "*.md"))

    def test_dotfiles_match_star(self):
        assert match_glob(".hidden.txt", "*.txt")
