import os

import pytest

from fsutil.config import Config
from fsutil.paths import PathResolver, clean_filename, clean_path, expand_homedir, user_home


class TestCleanPath:
    """Test path canonicalization against the live environment."""

    def test_dot_resolves_to_working_directory(self, tempdir, monkeypatch):
        """"." and "" should resolve to the cwd, never to an empty string."""
        monkeypatch.chdir(tempdir)
        cwd = os.getcwd()
        assert clean_path(".") == cwd
        assert clean_path("") == cwd

    def test_parent_segments_resolved_lexically(self):
        """.. is resolved textually even if the parent does not exist."""
        got = clean_path("/home/user/../bob/.password-store")
        assert got == os.path.abspath("/home/bob/.password-store")

    def test_repeated_separators_collapsed(self):
        got = clean_path("/home/user//.password-store")
        assert got == os.path.abspath("/home/user/.password-store")

    def test_existing_absolute_path_unchanged(self, tempdir):
        path = os.path.join(tempdir, "foo.gpg")
        assert clean_path(path) == os.path.abspath(path)

    def test_relative_path_anchored_at_cwd(self, tempdir, monkeypatch):
        monkeypatch.chdir(tempdir)
        assert clean_path("a/./b/../c") == os.path.join(os.getcwd(), "a", "c")

    def test_idempotent(self):
        """Resolving an already clean path returns it unchanged."""
        once = clean_path("/home/user/../bob//x")
        assert clean_path(once) == once

    def test_tilde_uses_override(self, tempdir, monkeypatch):
        monkeypatch.setenv(Config.HOMEDIR_ENV_VAR, tempdir)
        got = clean_path("~/.password-store")
        assert got == os.path.abspath(tempdir + "/.password-store")

    def test_tilde_without_override_uses_os_home(self):
        home = os.path.expanduser("~")
        got = clean_path("~/.password-store")
        assert got == os.path.abspath(home + "/.password-store")

    def test_override_read_on_every_call(self, tempdir, monkeypatch):
        """Changing the override between calls takes effect immediately."""
        first = os.path.join(tempdir, "one")
        second = os.path.join(tempdir, "two")

        monkeypatch.setenv(Config.HOMEDIR_ENV_VAR, first)
        assert clean_path("~") == os.path.abspath(first)

        monkeypatch.setenv(Config.HOMEDIR_ENV_VAR, second)
        assert clean_path("~") == os.path.abspath(second)

    def test_empty_override_ignored(self, monkeypatch):
        monkeypatch.setenv(Config.HOMEDIR_ENV_VAR, "")
        assert user_home() == os.path.expanduser("~")


class TestPathResolver:
    """Test the resolver with injected process state."""

    @pytest.fixture
    def resolver(self):
        return PathResolver(
            environ={},
            getcwd=lambda: os.path.abspath("/work"),
            home_lookup=lambda: os.path.abspath("/srv/home"),
        )

    def test_relative_joined_with_injected_cwd(self, resolver):
        assert resolver.resolve("a/../b") == os.path.abspath("/work/b")

    def test_dot_is_injected_cwd(self, resolver):
        assert resolver.resolve(".") == os.path.abspath("/work")

    def test_expansion_happens_before_cleaning(self, resolver):
        """~/../x expands against the home directory, then cleans."""
        assert resolver.resolve("~/../x") == os.path.abspath("/srv/x")

    def test_bare_tilde(self, resolver):
        assert resolver.resolve("~") == os.path.abspath("/srv/home")

    def test_override_takes_precedence(self):
        resolver = PathResolver(
            environ={Config.HOMEDIR_ENV_VAR: os.path.abspath("/override")},
            home_lookup=lambda: os.path.abspath("/srv/home"),
        )
        assert resolver.resolve("~/.password-store") == os.path.abspath(
            "/override/.password-store"
        )

    def test_custom_env_var(self):
        resolver = PathResolver(
            environ={"OTHER_HOMEDIR": os.path.abspath("/other")},
            home_lookup=lambda: None,
            env_var="OTHER_HOMEDIR",
        )
        assert resolver.user_home() == os.path.abspath("/other")

    def test_named_user_tilde_not_expanded(self, resolver):
        assert resolver.expand_homedir("~bob/x") == "~bob/x"

    def test_tilde_in_middle_not_expanded(self, resolver):
        assert resolver.expand_homedir("a/~/b") == "a/~/b"

    def test_unresolvable_home_leaves_tilde(self):
        """Without any home directory the path stays unexpanded."""
        resolver = PathResolver(
            environ={}, getcwd=lambda: os.path.abspath("/work"), home_lookup=lambda: None
        )
        assert resolver.expand_homedir("~/x") == "~/x"
        assert resolver.resolve("~/x") == os.path.join(os.path.abspath("/work"), "~", "x")

    def test_failing_home_lookup_degrades(self):
        def lookup():
            raise KeyError("uid not in passwd")

        resolver = PathResolver(environ={}, home_lookup=lookup)
        assert resolver.user_home() is None
        assert resolver.expand_homedir("~") == "~"

    def test_unreadable_cwd_returns_cleaned_relative(self):
        def getcwd():
            raise FileNotFoundError("cwd was removed")

        resolver = PathResolver(environ={}, getcwd=getcwd, home_lookup=lambda: None)
        assert resolver.resolve("a//b/../c") == os.path.join("a", "c")

    @pytest.mark.skipif(os.sep != "/", reason="POSIX root handling")
    def test_double_leading_slash_collapsed(self, resolver):
        assert resolver.resolve("//etc//passwd") == "/etc/passwd"


def test_expand_homedir_uses_environment(tempdir, monkeypatch):
    monkeypatch.setenv(Config.HOMEDIR_ENV_VAR, tempdir)
    assert expand_homedir("~/store") == os.path.join(tempdir, "store")


class TestCleanFilename:
    """Test filename sanitization."""

    def test_reference_vector(self):
        assert clean_filename('"§$%&aÜÄ*&b%§"\'Ä"c%$"\'"') == "a____b______c"

    def test_each_unsafe_char_becomes_one_underscore(self):
        """Runs of unsafe characters are not merged."""
        assert clean_filename("a/\\:b") == "a___b"
        assert len(clean_filename("x<>|?*y")) == len("x<>|?*y")

    def test_safe_characters_kept(self):
        assert clean_filename("user@example.com-2024_v1") == "user@example.com-2024_v1"

    def test_edges_trimmed(self):
        assert clean_filename("  name  ") == "name"
        assert clean_filename("__name__") == "name"

    def test_non_ascii_letters_replaced(self):
        assert clean_filename("cafébar") == "caf_bar"

    def test_only_unsafe_characters(self):
        assert clean_filename("§§§") == ""
