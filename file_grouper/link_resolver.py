"""
링크 해석 모듈: 심볼릭 링크(별칭)를 실제 경로로 한 단계 해석
"""

import os
from pathlib import Path


class InvalidDestination(Exception):
    """링크 정보를 읽을 수 없는 경로"""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}" if reason else str(path))


def resolve_link(path: Path) -> Path:
    """
    심볼릭 링크를 대상 경로로 해석

    링크가 아니거나 존재하지 않는 경로는 그대로 반환합니다.
    링크의 링크는 따라가지 않습니다 (한 단계만 해석).

    Args:
        path: 해석할 경로

    Returns:
        링크 대상 경로 또는 원래 경로

    Raises:
        InvalidDestination: 링크 정보를 읽을 수 없는 경우
    """
    path = Path(path)
    try:
        if not path.is_symlink():
            return path
        target = Path(os.readlink(path))
    except (OSError, ValueError) as e:
        raise InvalidDestination(path, str(e)) from e

    # 상대 경로 링크는 링크가 있는 폴더 기준
    if not target.is_absolute():
        target = path.parent / target

    return target
