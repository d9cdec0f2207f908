#!/usr/bin/env python3

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from functools import cached_property

from loguru import logger

# 按检测顺序排列：(名称, 标识环境变量)
CI_PROVIDERS: list[tuple[str, str]] = [
    ("bitrise", "BITRISE_IO"),
    ("jenkins", "JENKINS_URL"),
    ("gitlab", "GITLAB_CI"),
    ("github", "GITHUB_ACTIONS"),
]


def first_env_var_value(
    names: Iterable[str], environ: Mapping[str, str] | None = None
) -> str | None:
    """返回第一个非空环境变量的值，均未设置时返回 None"""
    if environ is None:
        environ = os.environ
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


class CIEnvironment:
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self.environ: Mapping[str, str] = os.environ if environ is None else environ

    def first(self, names: Iterable[str]) -> str | None:
        return first_env_var_value(names, self.environ)

    @cached_property
    def provider(self) -> str | None:
        for name, marker in CI_PROVIDERS:
            if self.environ.get(marker):
                return name
        return None

    @cached_property
    def is_ci(self) -> bool:
        return (
            self.environ.get("CI", "false").lower() == "true"
            or self.provider is not None
        )

    @cached_property
    def pipeline_id(self) -> int:
        bitrise_build_number = self.environ.get("BITRISE_BUILD_NUMBER")
        jenkins_build_number = self.environ.get("BUILD_NUMBER")
        gitlab_pipeline_id = self.environ.get("CI_PIPELINE_ID")
        github_pipeline_id = self.environ.get("GITHUB_RUN_ID")

        value = (
            bitrise_build_number
            or jenkins_build_number
            or gitlab_pipeline_id
            or github_pipeline_id
            or "0"
        )
        try:
            return int(value)
        except ValueError:
            logger.warning(f"无效的流水线编号：{value}")
            return 0

    @cached_property
    def job_name(self) -> str:
        bitrise_workflow = self.environ.get("BITRISE_TRIGGERED_WORKFLOW_ID")
        jenkins_job_name = self.environ.get("JOB_NAME")
        gitlab_job_name = self.environ.get("CI_JOB_NAME")
        github_job_name = self.environ.get("GITHUB_JOB")

        return (
            bitrise_workflow
            or jenkins_job_name
            or gitlab_job_name
            or github_job_name
            or ""
        )
