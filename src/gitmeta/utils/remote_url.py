#!/usr/bin/env python3

from __future__ import annotations

import re
from dataclasses import dataclass

# 第一个分组是组织名，第二个分组是仓库名
# 同时支持 HTTPS 和 SSH 格式，只要以 .git 结尾即可
GIT_REPO_REGEX = re.compile(r"(?:.*)[:|/]([\w-]+)/(.*)\.git")


@dataclass(frozen=True)
class RemoteRepo:
    org: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.org}/{self.name}"


def parse_remote_url(url: str) -> RemoteRepo | None:
    """从远程仓库地址中解析组织名和仓库名，如 git@github.com:acmeinc/iOS.git"""
    match = GIT_REPO_REGEX.search(url)
    if match is None:
        return None
    return RemoteRepo(org=match.group(1), name=match.group(2))
