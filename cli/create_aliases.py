#!/usr/bin/env python3
"""
별칭 일괄 생성 CLI

이름 목록 파일의 각 줄마다 첫 이름으로 폴더를 만들고,
나머지 이름은 그 폴더를 가리키는 심볼릭 링크로 만듭니다.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from file_grouper.alias_list import create_aliases_from_list
from file_grouper.config import GroupingConfig
from file_grouper.config_loader import create_config_from_yaml
from file_grouper.logger import create_session_logger
from file_grouper.reporter import print_log_paths, render_alias_report


def create_parser() -> argparse.ArgumentParser:
    """CLI 인자 파서 생성"""
    defaults = GroupingConfig()
    parser = argparse.ArgumentParser(
        prog="create-aliases",
        description="별칭 일괄 생성 도구 - 이름 목록 파일로 폴더와 링크 생성"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help=f"폴더와 링크를 만들 위치 (기본: {defaults.target_directory})"
    )
    parser.add_argument(
        "-n", "--names",
        type=str,
        default=None,
        help=f"이름 목록 파일 (기본: {defaults.names_file})"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML 설정 파일"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="로그 폴더 경로 (기본: ~/_GroupedFiles/logs)"
    )
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="로그 파일을 만들지 않음"
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """
    별칭 생성 실행

    Returns:
        종료 코드 (0: 성공, 1: 이름 목록 파일을 읽을 수 없음)
    """
    try:
        config = create_config_from_yaml(Path(args.config)) if args.config else GroupingConfig()
    except (OSError, ValueError) as e:
        print(f"오류: {e}", file=sys.stderr)
        return 1

    if args.output:
        config.target_directory = Path(args.output).expanduser()
    if args.names:
        config.names_file = Path(args.names).expanduser()
    if args.log_dir:
        config.log_dir = Path(args.log_dir).expanduser()

    try:
        logger = None if args.no_log else create_session_logger(config.log_dir)
    except OSError as e:
        print(f"오류: 로그 폴더를 사용할 수 없습니다: {e}", file=sys.stderr)
        return 1

    try:
        report = create_aliases_from_list(
            config.target_directory,
            config.names_file,
            config=config,
            logger=logger
        )
        if logger:
            logger.log_report(report)
    finally:
        if logger:
            logger.finalize()

    print(render_alias_report(report))
    if logger:
        print_log_paths(logger)
    return 1 if report.aborted else 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI 진입점"""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
