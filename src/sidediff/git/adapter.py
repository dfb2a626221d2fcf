"""Git subprocess wrapper — repo root lookup and streamed ``git log -p``."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from pathlib import Path
from typing import Iterator, Optional, Sequence

from sidediff.streams import iter_stream

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        raise GitError(f"git error: {result.stderr.strip()}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def iter_git_log(args: Sequence[str], cwd: Path) -> Iterator[str]:
    """Stream ``git log -p <args>`` output line by line.

    stderr is spooled to a temporary file and read once git exits. The
    child process is terminated if the consumer stops early.
    """
    cmd = ["git", "log", "-p", *args]
    logger.info("running %s", " ".join(cmd))
    with tempfile.TemporaryFile() as err_file:
        try:
            proc = subprocess.Popen(
                cmd,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=err_file,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError:
            raise GitError("git is not installed or not on PATH")

        assert proc.stdout is not None
        finished = False
        try:
            yield from iter_stream(proc.stdout)
            finished = True
        finally:
            if not finished and proc.poll() is None:
                logger.debug("consumer stopped early, terminating git (pid %d)", proc.pid)
                proc.terminate()
            proc.stdout.close()
            returncode = proc.wait()

        if returncode != 0:
            err_file.seek(0)
            stderr = err_file.read().decode("utf-8", errors="replace")
            raise GitError(f"git error: {stderr.strip()}")
