"""Shared test fixtures — sample diff logs and temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_log_two_commits() -> str:
    """First commit changes one line, second commit has no diff."""
    return textwrap.dedent("""\
        commit 1111111111111111111111111111111111111111
        Author: Ada <ada@example.com>
        Date:   Mon Jan 1 00:00:00 2024 +0000

            Change greeting

        diff --git a/hello.py b/hello.py
        index abc1234..def5678 100644
        --- a/hello.py
        +++ b/hello.py
        @@ -1,3 +1,3 @@ def greet():
         def greet():
        -    return "hi"
        +    return "hello"
         # end
        commit 2222222222222222222222222222222222222222
        Author: Ada <ada@example.com>
        Date:   Tue Jan 2 00:00:00 2024 +0000

            Empty commit
    """)


@pytest.fixture
def sample_diff_two_files() -> str:
    """Plain `git diff` output (no commit headers), ending inside a hunk."""
    return textwrap.dedent("""\
        diff --git a/a.txt b/a.txt
        index 1111111..2222222 100644
        --- a/a.txt
        +++ b/a.txt
        @@ -1,2 +1,2 @@
        -one
        +uno
         two
        @@ -10,1 +10,2 @@ section
         ten
        +eleven
        diff --git a/b.txt b/b.txt
        deleted file mode 100644
        index 3333333..0000000
        --- a/b.txt
        +++ /dev/null
        @@ -1,2 +0,0 @@
        -gone
        -also gone
    """)


@pytest.fixture
def sample_diff_rename() -> str:
    """A pure rename, followed by a renamed-and-edited file."""
    return textwrap.dedent("""\
        diff --git a/old name.py b/new name.py
        similarity index 100%
        rename from old name.py
        rename to new name.py
        diff --git a/src/x.py b/src/y.py
        similarity index 90%
        rename from src/x.py
        rename to src/y.py
        index abc1234..def5678 100644
        --- a/src/x.py
        +++ b/src/y.py
        @@ -1 +1 @@
        -x = 1
        +y = 1
    """)


@pytest.fixture
def sample_diff_binary() -> str:
    return textwrap.dedent("""\
        diff --git a/image.png b/image.png
        new file mode 100644
        index 0000000..abc1234
        Binary files /dev/null and b/image.png differ
    """)


@pytest.fixture
def sample_diff_coloured() -> str:
    """`git log -p --color=always` style output."""
    return (
        "\x1b[33mcommit 3333333333333333333333333333333333333333\x1b[m\n"
        "Author: Ada <ada@example.com>\n"
        "\x1b[1mdiff --git a/c.txt b/c.txt\x1b[m\n"
        "\x1b[1m--- a/c.txt\x1b[m\n"
        "\x1b[1m+++ b/c.txt\x1b[m\n"
        "\x1b[36m@@ -3,1 +3,1 @@\x1b[m\n"
        "\x1b[31m-old\x1b[m\n"
        "\x1b[32m+new\x1b[m\n"
    )


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with two commits."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    readme.write_text("# Test repo\n\nMore text.\n")
    subprocess.run(
        ["git", "commit", "-am", "expand readme"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
