"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest

from revlink.config.settings import Settings
from revlink.core.exceptions import RepositoryError
from revlink.core.models.remote import RepositorySnapshot


def _git(repo_path: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo_path, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, log_level="DEBUG")


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with a commit and a GitHub remote."""
    repo_path = tmp_path / "test-repo"
    repo_path.mkdir()

    _git(repo_path, "init")
    _git(repo_path, "config", "user.email", "test@test.com")
    _git(repo_path, "config", "user.name", "Test")
    _git(repo_path, "config", "commit.gpgsign", "false")

    (repo_path / "src").mkdir()
    (repo_path / "src" / "main.c").write_text(
        "#include <stdio.h>\n"
        "\n"
        "int main(void)\n"
        "{\n"
        '    puts("hello");\n'
        "    return 0;\n"
        "}\n"
    )
    (repo_path / "README.md").write_text("# Test Repo\n\nA test repository.\n")

    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")
    _git(repo_path, "remote", "add", "origin", "git@github.com:org/repo.git")

    return repo_path


@pytest.fixture
def head(git_repo: Path) -> str:
    return _git(git_repo, "rev-parse", "HEAD")


@pytest.fixture
def github_snapshot() -> RepositorySnapshot:
    return RepositorySnapshot(
        remotes=["origin", "upstream"],
        remote_urls={
            "origin": "git@github.com:me/project.git",
            "upstream": "https://gitlab.com/team/project.git",
        },
    )


class FakeRepository:
    """In-memory stand-in for GitRepository keyed by identifier."""

    registry: dict[str, "FakeRepository"] = {}

    def __init__(
        self,
        snapshot: RepositorySnapshot,
        files: dict[tuple[str, str], str] | None = None,
    ) -> None:
        self.snapshot = snapshot
        self.files = files or {}

    @classmethod
    def from_identifier(cls, identifier: str) -> "FakeRepository":
        if identifier not in cls.registry:
            raise RepositoryError(f"Not a git repository: {identifier}")
        return cls.registry[identifier]

    def list_remotes(self) -> list[str]:
        return self.snapshot.list_remotes()

    def get_config(self, namespace: str, key: str) -> str | None:
        return self.snapshot.get_config(namespace, key)

    def get_remote_url(self, remote_name: str) -> str | None:
        return self.snapshot.get_remote_url(remote_name)

    def show_file(self, revision: str, file_path: str) -> str:
        try:
            return self.files[(revision, file_path)]
        except KeyError:
            raise RepositoryError(f"Cannot read {file_path} at revision {revision}") from None


@pytest.fixture
def fake_repository_class():
    """FakeRepository with a clean registry for each test."""
    FakeRepository.registry = {}
    yield FakeRepository
    FakeRepository.registry = {}
