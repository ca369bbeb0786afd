"""
파일 그룹화 도구 - 핵심 모듈

제공 기능:
- GroupingConfig: 설정 클래스
- parse_names: 이름에서 그룹명/별칭 추출
- resolve_link: 심볼릭 링크 한 단계 해석
- FileOperations: 폴더 생성, 이동, 삭제, 링크 생성
- FileGrouper / group_files: 폴더 그룹화
- create_aliases_from_list: 이름 목록 파일로 별칭 일괄 생성
"""

from .config import GroupingConfig
from .name_parser import ParsedNames, parse_names
from .link_resolver import InvalidDestination, resolve_link
from .file_ops import FileOperations, FileOperation
from .duplicate_policy import on_duplicate_move
from .grouper import FileGrouper, RunReport, group_files
from .reporter import render_report, render_alias_report, print_report, print_log_paths
from .alias_list import AliasListReport, create_aliases_from_list

__version__ = "1.0.0"

__all__ = [
    'GroupingConfig',
    'ParsedNames',
    'parse_names',
    'InvalidDestination',
    'resolve_link',
    'FileOperations',
    'FileOperation',
    'on_duplicate_move',
    'FileGrouper',
    'RunReport',
    'group_files',
    'render_report',
    'render_alias_report',
    'print_report',
    'print_log_paths',
    'AliasListReport',
    'create_aliases_from_list',
]
