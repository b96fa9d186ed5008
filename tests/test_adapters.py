"""
Tests for revision probes — git and static.
"""

import shutil
import subprocess
from pathlib import Path

import pytest

from flakegen.adapters import GitRevisionProbe, StaticRevisionProbe

needs_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c", "user.name=Test",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    _git(tmp_path, "init", "-q")
    (tmp_path / "Cargo.toml").write_text('[package]\nname = "x"\nversion = "0.1.0"\n')
    _git(tmp_path, "add", "-A")
    _git(tmp_path, "commit", "-q", "-m", "initial")
    return tmp_path


class TestStaticProbe:
    def test_with_rev(self, tmp_path: Path):
        probe = StaticRevisionProbe(rev="abcdef0123456789")
        state = probe.probe(tmp_path)
        assert state.rev == "abcdef0123456789"
        assert state.source == "static"
        assert probe.call_log == [tmp_path]

    def test_without_rev(self, tmp_path: Path):
        state = StaticRevisionProbe().probe(tmp_path)
        assert state.rev is None
        assert not state.has_rev

    def test_availability(self):
        assert StaticRevisionProbe().is_available()
        assert not StaticRevisionProbe(available=False).is_available()

    def test_repr(self):
        assert repr(StaticRevisionProbe()) == "<StaticRevisionProbe name='static'>"


class TestGitProbe:
    @needs_git
    def test_clean_checkout(self, repo: Path):
        head = _git(repo, "rev-parse", "HEAD").strip()
        state = GitRevisionProbe().probe(repo)
        assert state.rev == head
        assert not state.dirty
        assert state.source == "git"

    @needs_git
    def test_dirty_tree_has_no_rev(self, repo: Path):
        (repo / "Cargo.toml").write_text('[package]\nname = "x"\nversion = "0.2.0"\n')
        state = GitRevisionProbe().probe(repo)
        assert state.rev is None
        assert state.dirty

    @needs_git
    def test_not_a_repository(self, tmp_path: Path, monkeypatch):
        plain = tmp_path / "plain"
        plain.mkdir()
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
        state = GitRevisionProbe().probe(plain)
        assert state.rev is None
        assert not state.dirty

    def test_git_missing(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(shutil, "which", lambda _name: None)
        probe = GitRevisionProbe()
        assert not probe.is_available()
        assert probe.probe(tmp_path).rev is None

    def test_timeout_degrades(self, tmp_path: Path, monkeypatch):
        def _timeout(*args, **kwargs):
            raise subprocess.TimeoutExpired(cmd="git", timeout=1)

        monkeypatch.setattr(shutil, "which", lambda _name: "/usr/bin/git")
        monkeypatch.setattr(subprocess, "run", _timeout)
        assert GitRevisionProbe(timeout=1).probe(tmp_path).rev is None
