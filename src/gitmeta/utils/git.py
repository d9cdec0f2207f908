#!/usr/bin/env python3

from __future__ import annotations

import subprocess
from pathlib import Path

from loguru import logger

from gitmeta.exceptions import GitCommandError


def run_git(*args: str, cwd: str | Path | None = None) -> str:
    """执行 git 命令并返回去除末尾空白的标准输出"""
    cmd = ["git", *args]
    logger.debug(f"正在执行命令 `{' '.join(cmd)}`...")
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise GitCommandError("未找到 git 命令", str(e)) from e
    except subprocess.CalledProcessError as e:
        raise GitCommandError(
            f"执行 `{' '.join(cmd)}` 失败", (e.stderr or "").strip()
        ) from e
    return result.stdout.rstrip()
