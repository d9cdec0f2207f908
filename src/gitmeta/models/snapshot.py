#!/usr/bin/env python3

from __future__ import annotations

from gitmeta.models.base import BaseModel


class MetadataSnapshot(BaseModel):
    """一次性解析出的全部 PR 和仓库信息，解析失败的字段为 None"""

    provider: str | None = None
    is_ci: bool = False
    pipeline_id: int = 0
    job_name: str | None = None
    pr_number: str | None = None
    pr_link: str | None = None
    pr_title: str | None = None
    pr_author_display_name: str | None = None
    pr_author_username: str | None = None
    repo_org: str | None = None
    repo_name: str | None = None
    repo_slug: str | None = None
    current_branch: str | None = None
    commit_hash: str | None = None
    commit_message: str | None = None
    commit_datetime: str | None = None
