#!/usr/bin/env python3
"""
파일 그룹화 도구 - 메인 진입점

사용법:
    # 폴더 그룹화 (기본)
    python main.py [대상폴더] [-d] [옵션]

    # 이름 목록으로 별칭 일괄 생성
    python main.py --aliases [-o 폴더] [-n 이름목록.txt]

기능:
    1. "A, B - 제목" 항목을 A 폴더로 이동
    2. B 폴더에 원본을 가리키는 심볼릭 링크 생성
    3. 중복 항목 보고 또는 삭제
    4. 이름 목록 파일로 폴더/별칭 일괄 생성
"""

import sys
import io
import argparse


def _setup_console_encoding():
    """Windows 콘솔 인코딩 설정"""
    if sys.platform == 'win32':
        try:
            if hasattr(sys.stdout, 'buffer') and sys.stdout.buffer and not sys.stdout.closed:
                sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
            if hasattr(sys.stderr, 'buffer') and sys.stderr.buffer and not sys.stderr.closed:
                sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')
        except (ValueError, AttributeError, OSError):
            pass


def main(argv=None) -> int:
    """메인 함수"""
    parser = argparse.ArgumentParser(
        description="파일 그룹화 도구 - 이름 규칙에 따른 폴더 그룹화와 별칭 링크",
        add_help=False
    )
    parser.add_argument(
        "--aliases",
        action="store_true",
        help="이름 목록 파일로 별칭 일괄 생성 모드"
    )

    args, rest = parser.parse_known_args(argv)

    _setup_console_encoding()

    if args.aliases:
        from cli.create_aliases import main as aliases_main
        return aliases_main(rest)

    from cli.group_files import main as group_main
    return group_main(rest)


if __name__ == "__main__":
    sys.exit(main())
