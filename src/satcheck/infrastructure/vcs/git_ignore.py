"""Git ignore oracle.

Loads the set of ignored, untracked paths of the enclosing git
repository once, then answers lookups by exact resolved path.

Fail open: when the repository or git itself is unavailable the
oracle is empty and ignores nothing.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from satcheck.infrastructure.logging import get_logger

logger = get_logger(__name__)

_GIT_TIMEOUT_SECONDS = 60


class GitCommandError(Exception):
    """git exited with non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{' '.join(command)} exited with {returncode}: {stderr.strip()}")


def _run_git(args: list[str], cwd: Path) -> bytes:
    """Run git and return raw stdout.

    Output stays bytes: file names need not be valid in any text encoding.

    Raises:
        OSError: git binary missing or cwd inaccessible
        GitCommandError: non-zero exit
    """
    cmd = ["git", *args]
    proc = subprocess.run(
        cmd,
        cwd=cwd,
        capture_output=True,
        check=False,
        timeout=_GIT_TIMEOUT_SECONDS,
    )
    if proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr.decode(errors="replace"))
    return proc.stdout


class VcsIgnoreOracle:
    """Answers "is this path ignored by version control?".

    Read-only after construction, safe to share by reference
    across all filters of one run.
    """

    def __init__(self, ignored_paths: frozenset[Path] = frozenset()) -> None:
        """Initialize oracle.

        Args:
            ignored_paths: Ignored paths, normalized to absolute resolved form here.
        """
        self._ignored = frozenset(Path(p).resolve() for p in ignored_paths)

    @classmethod
    def discover(cls, start: Path | None = None) -> VcsIgnoreOracle:
        """Build oracle from the git repository enclosing start.

        Args:
            start: Directory to search from. None = current working directory.

        Returns:
            Oracle with all ignored-and-untracked paths, or an empty
            oracle if discovery fails for any infrastructure reason.
        """
        cwd = start if start is not None else Path.cwd()
        try:
            top_level = Path(os.fsdecode(_run_git(["rev-parse", "--show-toplevel"], cwd).strip()))
            listing = _run_git(
                ["ls-files", "--others", "--ignored", "--exclude-standard", "-z"],
                top_level,
            )
            oracle = cls(
                frozenset(top_level / os.fsdecode(name) for name in listing.split(b"\0") if name)
            )
        except (OSError, UnicodeDecodeError, GitCommandError, subprocess.TimeoutExpired) as exc:
            logger.warning(
                "An error occurred trying to get all git ignored files, "
                "nothing will be suppressed: {error}",
                error=exc,
            )
            return cls()

        logger.debug(
            "Loaded {count} git ignored paths from {root}", count=len(oracle), root=top_level
        )
        return oracle

    @property
    def ignored_paths(self) -> frozenset[Path]:
        """Resolved ignored paths."""
        return self._ignored

    def is_ignored(self, path: str | os.PathLike[str]) -> bool:
        """Check whether path is ignored.

        Empty set always answers False (accept everything).
        """
        if not self._ignored:
            return False
        return Path(path).resolve() in self._ignored

    def __len__(self) -> int:
        return len(self._ignored)
