import os
import subprocess
from pathlib import Path

import pytest

from gitmeta.config import Config

COMMIT_DATE = "2022-05-23T20:09:38+0000"


def git(*args: str, cwd: Path) -> str:
    env = {
        **os.environ,
        "GIT_AUTHOR_NAME": "Roger Oba",
        "GIT_AUTHOR_EMAIL": "roger@example.com",
        "GIT_COMMITTER_NAME": "Roger Oba",
        "GIT_COMMITTER_EMAIL": "roger@example.com",
        "GIT_AUTHOR_DATE": COMMIT_DATE,
        "GIT_COMMITTER_DATE": COMMIT_DATE,
    }
    return subprocess.check_output(
        ["git", *args], cwd=cwd, env=env, text=True
    ).strip()


@pytest.fixture
def config() -> Config:
    return Config(remote="", base_branch="main", web_url="https://github.com")


@pytest.fixture
def remote_repo(tmp_path: Path) -> Path:
    """本地的裸仓库，路径形如 .../acmeinc/iOS.git"""
    path = tmp_path / "acmeinc" / "iOS.git"
    path.mkdir(parents=True)
    _ = git("init", "--bare", "-b", "main", cwd=path)
    return path


@pytest.fixture
def git_repo(tmp_path: Path, remote_repo: Path) -> Path:
    """带有一次提交并已推送到 remote_repo 的工作仓库"""
    path = tmp_path / "work"
    path.mkdir()
    _ = git("init", "-b", "main", cwd=path)
    _ = (path / "README.md").write_text("hello\n")
    _ = git("add", "README.md", cwd=path)
    _ = git("commit", "-m", "Dump all env vars.", cwd=path)
    _ = git("remote", "add", "origin", str(remote_repo), cwd=path)
    _ = git("push", "origin", "main", cwd=path)
    return path
