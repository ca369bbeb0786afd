#!/usr/bin/env python3
"""
폴더 그룹화 CLI

"그룹명, 별칭 - 제목" 형식의 항목을 그룹 폴더로 옮기고,
별칭 폴더에는 원본을 가리키는 심볼릭 링크를 만듭니다.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from file_grouper.config import GroupingConfig
from file_grouper.config_loader import create_config_from_yaml
from file_grouper.grouper import FileGrouper
from file_grouper.logger import create_session_logger
from file_grouper.reporter import print_log_paths, print_report


def create_parser() -> argparse.ArgumentParser:
    """CLI 인자 파서 생성"""
    defaults = GroupingConfig()
    parser = argparse.ArgumentParser(
        prog="group-files",
        description="폴더 그룹화 도구 - 'A, B - 제목' 항목을 A 폴더로 옮기고 B 폴더에 링크 생성",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
사용 예시:
    # 기본 폴더 그룹화
    group-files

    # 다른 폴더 그룹화
    group-files ~/Music/Sets

    # 이미 있는 항목은 원본 삭제
    group-files ~/Music/Sets -d -y
        """
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help=f"대상 폴더 (기본: {defaults.target_directory})"
    )
    parser.add_argument(
        "-o", "--output",
        dest="output",
        default=None,
        help="대상 폴더 (위치 인자 대신 사용)"
    )
    parser.add_argument(
        "-d", "--delete-duplicates",
        action="store_true",
        help="그룹 폴더에 같은 이름이 이미 있으면 원본 삭제"
    )
    parser.add_argument(
        "--trash",
        action="store_true",
        help="삭제 대신 휴지통으로 이동"
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
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="확인 없이 실행"
    )
    return parser


def build_config(args: argparse.Namespace) -> GroupingConfig:
    """설정 파일과 CLI 인자로 설정 생성 (CLI 인자가 우선)"""
    if args.config:
        config = create_config_from_yaml(Path(args.config))
    else:
        config = GroupingConfig()

    target = args.output or args.target
    if target:
        config.target_directory = Path(target).expanduser()
    if args.delete_duplicates:
        config.delete_duplicates = True
    if args.trash:
        config.use_recycle_bin = True
    if args.log_dir:
        config.log_dir = Path(args.log_dir).expanduser()

    return config


def run(args: argparse.Namespace) -> int:
    """
    그룹화 실행

    Returns:
        종료 코드 (0: 성공, 1: 치명적 오류)
    """
    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        print(f"오류: {e}", file=sys.stderr)
        return 1

    if config.delete_duplicates and not args.yes:
        confirm = input("\n중복 원본을 실제로 삭제하시겠습니까? (yes 입력): ").strip()
        if confirm.lower() != "yes":
            print("취소되었습니다.")
            return 0

    try:
        logger = None if args.no_log else create_session_logger(config.log_dir)
    except OSError as e:
        print(f"오류: 로그 폴더를 사용할 수 없습니다: {e}", file=sys.stderr)
        return 1

    try:
        grouper = FileGrouper(config, logger)
        report = grouper.group(config.target_directory, config.delete_duplicates)
        if logger:
            logger.log_report(report)
    finally:
        if logger:
            logger.finalize()

    print_report(report)
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
