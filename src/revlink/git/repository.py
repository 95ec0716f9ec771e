"""Git repository facts using subprocess."""

import subprocess
from pathlib import Path

import structlog

from revlink.core.exceptions import RepositoryError

logger = structlog.get_logger(__name__)


class GitRepository:
    """Reads remotes, configuration and file contents from a Git repository.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser().resolve()
        self._toplevel: Path | None = None

    @classmethod
    def from_identifier(cls, identifier: str) -> "GitRepository":
        """Open the repository named by a link address identifier."""
        repository = cls(identifier)
        if not repository.is_git_repo():
            raise RepositoryError(
                f"Not a git repository: {identifier}",
                details={"repository": identifier},
            )
        return repository

    @classmethod
    def for_file(cls, file_path: str | Path) -> "GitRepository":
        """Open the repository containing ``file_path``."""
        path = Path(file_path).expanduser().resolve()
        repository = cls(path if path.is_dir() else path.parent)
        if not repository.is_git_repo():
            raise RepositoryError(
                f"File is not inside a git repository: {file_path}",
                details={"file": str(file_path)},
            )
        return repository

    def _run_git(self, *args: str, strip: bool = True) -> str:
        """Run a git command and return stdout."""
        if not self._path.is_dir():
            raise RepositoryError(
                f"No such directory: {self._path}", details={"path": str(self._path)}
            )
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=self._path,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as exc:
            raise RepositoryError(
                "git executable not found", details={"path": str(self._path)}
            ) from exc
        return result.stdout.strip() if strip else result.stdout

    def is_git_repo(self) -> bool:
        """Check if the path is a valid git repository."""
        try:
            self._run_git("rev-parse", "--git-dir")
            return True
        except (subprocess.CalledProcessError, RepositoryError):
            return False

    @property
    def toplevel(self) -> Path:
        """Root of the working tree."""
        if self._toplevel is None:
            try:
                self._toplevel = Path(self._run_git("rev-parse", "--show-toplevel"))
            except subprocess.CalledProcessError as exc:
                raise RepositoryError(
                    f"Cannot find repository root for {self._path}",
                    details={"path": str(self._path), "stderr": exc.stderr},
                ) from exc
        return self._toplevel

    @property
    def identifier(self) -> str:
        """Repository root with the home directory collapsed to ``~``."""
        root = self.toplevel
        home = Path.home()
        try:
            return f"~/{root.relative_to(home).as_posix()}"
        except ValueError:
            return root.as_posix()

    def current_revision(self, short: bool = False) -> str:
        """Get the current HEAD commit hash."""
        args = ["rev-parse", "--short", "HEAD"] if short else ["rev-parse", "HEAD"]
        try:
            return self._run_git(*args)
        except subprocess.CalledProcessError as exc:
            raise RepositoryError(
                f"Cannot resolve HEAD in {self._path}",
                details={"path": str(self._path), "stderr": exc.stderr},
            ) from exc

    def relative_path(self, file_path: str | Path) -> str:
        """Path of a working-tree file relative to the repository root."""
        path = Path(file_path).expanduser().resolve()
        try:
            return path.relative_to(self.toplevel.resolve()).as_posix()
        except ValueError as exc:
            raise RepositoryError(
                f"{file_path} is outside repository {self.toplevel}",
                details={"file": str(file_path), "repository": str(self.toplevel)},
            ) from exc

    def list_remotes(self) -> list[str]:
        """Configured remote names."""
        try:
            output = self._run_git("remote")
        except subprocess.CalledProcessError:
            logger.warning("git remote failed", path=str(self._path))
            return []
        return output.splitlines() if output else []

    def get_config(self, namespace: str, key: str) -> str | None:
        """Get ``namespace.key`` from git config, if set."""
        try:
            value = self._run_git("config", "--get", f"{namespace}.{key}")
        except subprocess.CalledProcessError:
            return None
        return value or None

    def get_remote_url(self, remote_name: str) -> str | None:
        """Get the URL of a remote, if available."""
        return self.get_config(f"remote.{remote_name}", "url")

    def show_file(self, revision: str, file_path: str) -> str:
        """Read a file as it exists at ``revision``."""
        try:
            return self._run_git("show", f"{revision}:{file_path}", strip=False)
        except subprocess.CalledProcessError as exc:
            raise RepositoryError(
                f"Cannot read {file_path} at revision {revision}",
                details={
                    "repository": str(self._path),
                    "revision": revision,
                    "file_path": file_path,
                    "stderr": exc.stderr,
                },
            ) from exc
