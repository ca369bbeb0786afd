"""
CLI 모듈 - 파일 그룹화 도구 명령행 인터페이스
"""

from .group_files import main as group_files_main
from .create_aliases import main as create_aliases_main

__all__ = [
    'group_files_main',
    'create_aliases_main',
]
