"""
중복 처리 정책: 이동 대상에 같은 이름이 이미 있을 때의 처리
"""

from pathlib import Path
from typing import Set

from . import problems
from .file_ops import FileOperations
from .problems import Problem


def on_duplicate_move(source: Path, target: Path, delete_duplicates: bool,
                      file_ops: FileOperations) -> Set[Problem]:
    """
    그룹 폴더로의 이동이 중복으로 막혔을 때 처리

    별칭 링크의 중복에는 적용하지 않습니다 (항상 보고만 함).

    Args:
        source: 이동하려던 원본
        target: 이미 존재하는 대상 경로
        delete_duplicates: True면 원본 삭제
        file_ops: 삭제에 사용할 FileOperations

    Returns:
        문제 집합 (항상 한 건)
    """
    if not delete_duplicates:
        return {problems.duplicate(source)}

    op = file_ops.delete_item(source)
    if op.created:
        return {problems.duplicate_deleted(source)}

    return {op.problem}
