#!/usr/bin/env python3

from __future__ import annotations

from collections.abc import Mapping
from functools import cached_property
from pathlib import Path
from typing import ClassVar

from loguru import logger

from gitmeta.config import Config
from gitmeta.exceptions import GitCommandError, RemoteURLError
from gitmeta.models.snapshot import MetadataSnapshot
from gitmeta.utils.ci_environment import CIEnvironment
from gitmeta.utils.git import run_git
from gitmeta.utils.remote_url import RemoteRepo, parse_remote_url


class GitHelper:
    """从 CI 环境变量中读取 PR 和仓库信息，找不到时回退到本地 git 命令

    每项信息都有一个按优先级排列的环境变量候选列表，第一个非空的值会被原样返回。
    需要支持新的 CI 服务时，在对应列表末尾追加变量即可。
    """

    PR_NUMBER_ENV_VARS: ClassVar[list[str]] = [
        "BITRISE_PULL_REQUEST",  # Bitrise
        "CHANGE_ID",  # Jenkins
        "CI_MERGE_REQUEST_IID",  # GitLab
    ]
    PR_LINK_ENV_VARS: ClassVar[list[str]] = [
        "CHANGE_URL",  # Jenkins
    ]
    PR_TITLE_ENV_VARS: ClassVar[list[str]] = [
        "BITRISE_GIT_MESSAGE",  # Bitrise，可能是提交信息而不是 PR 标题
        "CHANGE_TITLE",  # Jenkins
        "CI_MERGE_REQUEST_TITLE",  # GitLab
    ]
    PR_AUTHOR_DISPLAY_NAME_ENV_VARS: ClassVar[list[str]] = [
        "GIT_CLONE_COMMIT_AUTHOR_NAME",  # Bitrise
        "CHANGE_AUTHOR_DISPLAY_NAME",  # Jenkins
        "GITLAB_USER_NAME",  # GitLab
    ]
    PR_AUTHOR_USERNAME_ENV_VARS: ClassVar[list[str]] = [
        "CHANGE_AUTHOR",  # Jenkins
        "GITLAB_USER_LOGIN",  # GitLab
        "GITHUB_ACTOR",  # GitHub
    ]
    BRANCH_ENV_VARS: ClassVar[list[str]] = [
        "BITRISE_GIT_BRANCH",  # Bitrise
        "CHANGE_BRANCH",  # Jenkins（多分支流水线中的 PR）
        "BRANCH_NAME",  # Jenkins
        "GIT_BRANCH",  # Jenkins Git 插件
        "CI_MERGE_REQUEST_SOURCE_BRANCH_NAME",  # GitLab
        "CI_COMMIT_REF_NAME",  # GitLab
        "GITHUB_HEAD_REF",  # GitHub PR
        "GITHUB_REF_NAME",  # GitHub
    ]
    COMMIT_HASH_ENV_VARS: ClassVar[list[str]] = [
        "BITRISE_GIT_COMMIT",  # Bitrise
        "GIT_COMMIT",  # Jenkins
        "CI_COMMIT_SHA",  # GitLab
        "GITHUB_SHA",  # GitHub
    ]

    SNAPSHOT_FIELDS: ClassVar[list[str]] = [
        "pr_number",
        "pr_link",
        "pr_title",
        "pr_author_display_name",
        "pr_author_username",
        "repo_org",
        "repo_name",
        "repo_slug",
        "current_branch",
        "commit_hash",
        "commit_message",
        "commit_datetime",
    ]

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        cwd: str | Path | None = None,
        config: Config | None = None,
    ) -> None:
        self.config = config if config is not None else Config()
        self.ci = CIEnvironment(environ)
        self.cwd = Path(cwd if cwd is not None else self.config.repo_dir)

    def _git(self, *args: str) -> str:
        return run_git(*args, cwd=self.cwd)

    @cached_property
    def repo_remote_url(self) -> str:
        """远程仓库地址，如 https://github.com/acmeinc/iOS.git 或 git@github.com:acmeinc/iOS.git"""
        remote = self.config.remote
        if not remote:
            remotes = self._git("remote").splitlines()
            if not remotes:
                raise RemoteURLError(f"仓库 {self.cwd} 未配置任何远程仓库")
            remote = remotes[0]
        return self._git("remote", "get-url", remote)

    @cached_property
    def _remote_repo(self) -> RemoteRepo | None:
        repo = parse_remote_url(self.repo_remote_url)
        if repo is None:
            logger.warning(f"无法从远程仓库地址中解析组织名和仓库名：{self.repo_remote_url}")
        return repo

    @property
    def repo_org(self) -> str | None:
        """组织名，如 https://github.com/acmeinc/iOS 中的 acmeinc"""
        return self._remote_repo.org if self._remote_repo else None

    @property
    def repo_name(self) -> str | None:
        """仓库名，如 https://github.com/acmeinc/iOS 中的 iOS"""
        return self._remote_repo.name if self._remote_repo else None

    @property
    def repo_slug(self) -> str:
        if self._remote_repo is None:
            raise RemoteURLError(f"无法解析远程仓库地址：{self.repo_remote_url}")
        return self._remote_repo.slug

    @property
    def pr_number(self) -> str | None:
        return self.ci.first(self.PR_NUMBER_ENV_VARS)

    @property
    def pr_link(self) -> str | None:
        link = self.ci.first(self.PR_LINK_ENV_VARS)
        if link:
            return link
        pr_number = self.pr_number
        if pr_number is None:
            return None
        return f"{self.config.web_url.rstrip('/')}/{self.repo_slug}/pull/{pr_number}"

    @property
    def pr_title(self) -> str | None:
        return self.ci.first(self.PR_TITLE_ENV_VARS)

    @property
    def pr_author_display_name(self) -> str:
        # 部分 CI 服务中拿到的可能是最后一次提交的作者，而不是 PR 作者
        return self.ci.first(self.PR_AUTHOR_DISPLAY_NAME_ENV_VARS) or self._git(
            "log", "-1", "--pretty=format:%an"
        )

    @property
    def pr_author_username(self) -> str | None:
        return self.ci.first(self.PR_AUTHOR_USERNAME_ENV_VARS)

    @property
    def current_branch(self) -> str:
        return self.ci.first(self.BRANCH_ENV_VARS) or self._git(
            "rev-parse", "--abbrev-ref", "HEAD"
        )

    @property
    def commit_hash(self) -> str:
        return self.ci.first(self.COMMIT_HASH_ENV_VARS) or self._git(
            "show", "-s", "--format=%H"
        )

    def base_commit_hash(self, base_branch: str | None = None) -> str:
        """从远程仓库获取基准分支的最新提交，分支不存在时返回空字符串"""
        branch = base_branch or self.config.base_branch
        output = self._git(
            "ls-remote", self.repo_remote_url, "--heads", f"refs/heads/{branch}"
        )
        if not output:
            return ""
        return output.splitlines()[0].split("\t")[0].strip()

    @property
    def commit_message(self) -> str:
        return self._git("log", "-1", "--format=%s", self.commit_hash).strip()

    @property
    def commit_datetime(self) -> str:
        """当前提交的时间，如 Mon May 23 20:09:38 2022 +0000"""
        return self._git(
            "show", "--no-patch", "--no-notes", "--pretty=%cd", self.commit_hash
        ).strip()

    def snapshot(self) -> MetadataSnapshot:
        """解析全部信息，单项失败时记为 None"""
        values: dict[str, str | None] = {}
        for field in self.SNAPSHOT_FIELDS:
            try:
                values[field] = getattr(self, field)
            except (GitCommandError, RemoteURLError) as e:
                logger.warning(f"获取 {field} 失败: {e}")
                values[field] = None
        return MetadataSnapshot(
            provider=self.ci.provider,
            is_ci=self.ci.is_ci,
            pipeline_id=self.ci.pipeline_id,
            job_name=self.ci.job_name or None,
            **values,
        )
