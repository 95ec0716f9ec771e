"""Tests for URL resolver."""

import pytest

from factories import RemoteURLPatternFactory
from revlink.core.exceptions import NoURLDeterminableError
from revlink.core.models.remote import RemoteURLPattern
from revlink.git.url_resolver import URLResolver, substitute


@pytest.mark.unit
class TestURLResolver:
    """Tests for URLResolver."""

    def test_override_wins(self) -> None:
        resolver = URLResolver([RemoteURLPatternFactory()])
        url = resolver.resolve(
            "abc123",
            "src/main.c",
            override_template="http://x/%r/%f",
            remote_url="https://forge0.example.org/org/repo.git",
        )
        assert url == "http://x/abc123/src/main.c"

    def test_override_without_remote_or_patterns(self) -> None:
        resolver = URLResolver([])
        url = resolver.resolve("abc123", "src/main.c", override_template="http://x/%r/%f")
        assert url == "http://x/abc123/src/main.c"

    def test_resolve_github_ssh(self) -> None:
        resolver = URLResolver()
        url = resolver.resolve("abc123", "src/main.c", remote_url="git@github.com:org/repo.git")
        assert url == "https://github.com/org/repo/blob/abc123/src/main.c"

    def test_resolve_github_https(self) -> None:
        resolver = URLResolver()
        url = resolver.resolve("main", "README.md", remote_url="https://github.com/org/repo")
        assert url == "https://github.com/org/repo/blob/main/README.md"

    def test_resolve_gitlab_subgroup(self) -> None:
        resolver = URLResolver()
        url = resolver.resolve(
            "v1.0", "lib/x.rb", remote_url="ssh://git@gitlab.com/group/sub/repo.git"
        )
        assert url == "https://gitlab.com/group/sub/repo/-/blob/v1.0/lib/x.rb"

    def test_resolve_sourcehut(self) -> None:
        resolver = URLResolver()
        url = resolver.resolve("abc", "main.go", remote_url="git@git.sr.ht:~user/proj")
        assert url == "https://git.sr.ht/~user/proj/tree/abc/item/main.go"

    def test_resolve_savannah(self) -> None:
        resolver = URLResolver()
        url = resolver.resolve(
            "abc", "lisp/simple.el", remote_url="https://git.savannah.gnu.org/git/emacs.git"
        )
        assert url == "https://git.savannah.gnu.org/cgit/emacs.git/tree/lisp/simple.el?id=abc"

    def test_first_matching_pattern_wins(self) -> None:
        first = RemoteURLPattern(pattern=r"example\.org/(.+)$", template="first/%n/%r/%f")
        second = RemoteURLPattern(pattern=r"example\.org/(.+)$", template="second/%n/%r/%f")
        resolver = URLResolver([first, second])
        assert resolver.resolve("r", "f", remote_url="https://example.org/x") == "first/x/r/f"

    def test_no_match(self) -> None:
        resolver = URLResolver()
        with pytest.raises(NoURLDeterminableError) as exc_info:
            resolver.resolve("abc", "a.txt", remote_url="https://example.invalid/repo.git")
        assert "a.txt" in str(exc_info.value)
        assert exc_info.value.details["remote_url"] == "https://example.invalid/repo.git"

    def test_absent_remote(self) -> None:
        with pytest.raises(NoURLDeterminableError):
            URLResolver().resolve("abc", "a.txt")

    def test_match_returns_capture(self) -> None:
        entry, captured = URLResolver().match("git@github.com:org/repo.git")
        assert entry.name == "github"
        assert captured == "org/repo"


@pytest.mark.unit
class TestSubstitute:
    """Tests for placeholder substitution."""

    def test_single_pass(self) -> None:
        assert substitute("%r/%f", {"r": "%f", "f": "x"}) == "%f/x"

    def test_unknown_placeholder_kept(self) -> None:
        assert substitute("%n/%r/%q", {"r": "v"}) == "%n/v/%q"

    def test_repeated_placeholder(self) -> None:
        assert substitute("%r-%r", {"r": "v"}) == "v-v"


@pytest.mark.unit
class TestRemoteURLPattern:
    """Tests for RemoteURLPattern validation."""

    def test_requires_capture_group(self) -> None:
        with pytest.raises(ValueError):
            RemoteURLPattern(pattern=r"github\.com", template="%n")

    def test_rejects_invalid_regex(self) -> None:
        with pytest.raises(ValueError):
            RemoteURLPattern(pattern=r"(unclosed", template="%n")

    def test_compiled_once(self) -> None:
        entry = RemoteURLPattern(pattern=r"example\.org/(.+)$", template="%n")
        assert entry.regex is entry.__pydantic_private__["_regex"]
        assert entry.regex.pattern == r"example\.org/(.+)$"
        assert entry.match("https://example.org/a/b").group(1) == "a/b"
