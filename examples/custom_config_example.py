#!/usr/bin/env python3
"""
사용자 맞춤 설정 예제

이 파일을 복사하여 본인의 환경에 맞게 수정하세요.
"""

import sys
from pathlib import Path

# 상위 디렉토리 모듈 import
sys.path.insert(0, str(Path(__file__).parent.parent))

from file_grouper.config import GroupingConfig
from file_grouper.grouper import FileGrouper
from file_grouper.logger import create_session_logger
from file_grouper.reporter import print_report

# ============================================================
# 사용자 맞춤 설정 - 아래 값들을 본인의 환경에 맞게 수정하세요
# ============================================================

# 그룹화 대상 폴더
TARGET_DIR = Path.home() / "Music" / "Sets"

# 로그 저장 위치
LOG_DIR = Path.home() / "_GroupedFiles" / "logs"

# "A feat. B - 제목" 처럼 다른 구분자를 쓰는 경우 여기서 변경
NAME_DELIMITER = " - "
ALIAS_SEPARATORS = ",&"

# 그룹 폴더에 같은 이름이 이미 있으면 원본 삭제 (휴지통 사용)
DELETE_DUPLICATES = False
USE_RECYCLE_BIN = True


def main():
    """실행"""
    print("=" * 60)
    print("  맞춤 설정 폴더 그룹화")
    print("=" * 60)
    print(f"\n대상 폴더: {TARGET_DIR}")
    print(f"로그 폴더: {LOG_DIR}\n")

    config = GroupingConfig(
        target_directory=TARGET_DIR,
        delete_duplicates=DELETE_DUPLICATES,
        use_recycle_bin=USE_RECYCLE_BIN,
        name_delimiter=NAME_DELIMITER,
        alias_separators=ALIAS_SEPARATORS,
        log_dir=LOG_DIR,
    )

    logger = create_session_logger(config.log_dir)
    try:
        report = FileGrouper(config, logger).group()
        logger.log_report(report)
    finally:
        logger.finalize()

    print_report(report)


if __name__ == "__main__":
    main()
