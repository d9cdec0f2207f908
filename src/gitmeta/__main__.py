#!/usr/bin/env python3

import argparse
import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from loguru import logger
from pydantic import ValidationError

from gitmeta.config import Config, LogLevel
from gitmeta.exceptions import ConfigError, GitCommandError, RemoteURLError
from gitmeta.git_helper import GitHelper
from gitmeta.utils.formatter import format_snapshot, format_value
from gitmeta.utils.metadata import Metadata

CI_FIELDS = ["provider", "is_ci", "pipeline_id", "job_name"]
FIELDS = [*GitHelper.SNAPSHOT_FIELDS, "base_commit_hash", *CI_FIELDS]


@dataclass
class GitMetaArgs(argparse.Namespace):
    directory: str
    json: bool
    output: str
    base_branch: str
    log_level: str
    fields: list[str]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="gitmeta - 从 CI 环境变量或本地 git 仓库中读取 PR 和仓库信息",
    )
    _ = parser.add_argument(
        "--directory",
        "-C",
        help="设置工作目录，执行前会先切换到该目录",
    )
    _ = parser.add_argument(
        "--json",
        action="store_true",
        help="以 JSON 格式输出",
    )
    _ = parser.add_argument(
        "--output",
        "-o",
        help="同时将全部信息写入指定的 JSON 文件",
    )
    _ = parser.add_argument(
        "--base-branch",
        help="获取 base_commit_hash 时使用的基准分支，默认读取配置",
    )
    _ = parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="设置日志等级",
    )
    _ = parser.add_argument(
        "fields",
        nargs="*",
        help=f"要输出的字段，默认输出全部：{', '.join(FIELDS)}",
    )

    return parser.parse_args(argv)


def load_config() -> Config:
    try:
        return Config()
    except ValidationError as e:
        raise ConfigError(f"配置文件错误: {e}") from e


def read_field(helper: GitHelper, name: str, base_branch: str | None) -> object:
    if name == "base_commit_hash":
        return helper.base_commit_hash(base_branch)
    if name in CI_FIELDS:
        return getattr(helper.ci, name)
    return getattr(helper, name)


def print_fields(helper: GitHelper, args: GitMetaArgs) -> None:
    values = {name: read_field(helper, name, args.base_branch) for name in args.fields}
    if args.json:
        print(json.dumps(values, ensure_ascii=False, indent=2))
    else:
        for value in values.values():
            print(format_value(value))


def main(argv: list[str] | None = None) -> None:
    args = cast(GitMetaArgs, parse_args(argv))

    if args.directory:
        os.chdir(Path(args.directory).expanduser().resolve())

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    log_level = args.log_level or config.log_level.value
    _ = logger.remove()
    _ = logger.add(sys.stderr, level=log_level)

    unknown = [name for name in args.fields if name not in FIELDS]
    if unknown:
        logger.error(f"无效的字段名称：{', '.join(unknown)}")
        sys.exit(1)

    helper = GitHelper(config=config)

    try:
        snapshot = None
        if args.fields:
            print_fields(helper, args)
        else:
            snapshot = helper.snapshot()
            if args.json:
                print(snapshot.model_dump_json(indent=2))
            else:
                print(format_snapshot(snapshot))

        if args.output:
            Metadata.generate(snapshot or helper.snapshot(), args.output)
            logger.success(f"已写入 {args.output}")
    except (GitCommandError, RemoteURLError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
