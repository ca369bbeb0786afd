"""
파일 작업 모듈: 폴더 생성, 이동, 삭제, 심볼릭 링크 생성

모든 작업은 예외를 밖으로 던지지 않고 FileOperation 결과로 보고합니다.
"""

import os
import shutil
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass
from enum import Enum

from send2trash import send2trash

from . import problems
from .config import GroupingConfig
from .problems import Problem


class OperationType(Enum):
    """파일 작업 유형"""
    MKDIR = "mkdir"
    MOVE = "move"
    SYMLINK = "symlink"
    DELETE = "delete"
    RECYCLE = "recycle"


@dataclass
class FileOperation:
    """파일 작업 정보"""
    action: OperationType
    source: Path
    destination: Optional[Path] = None
    status: str = "pending"  # pending, success, skipped, duplicate, failed
    problem: Optional[Problem] = None

    @property
    def ok(self) -> bool:
        return self.status in ("success", "skipped")

    @property
    def created(self) -> bool:
        return self.status == "success"


def path_exists(path: Path) -> bool:
    """존재 확인 (깨진 심볼릭 링크도 존재하는 것으로 취급)"""
    return path.is_symlink() or path.exists()


def same_item(first: Path, second: Path) -> bool:
    """두 경로가 같은 실제 항목인지 확인 (링크를 따라감)"""
    if first == second:
        return True
    try:
        return os.path.samefile(first, second)
    except OSError:
        return False


class FileOperations:
    """파일 작업 클래스"""

    def __init__(self, config: GroupingConfig = None, logger=None):
        self.config = config or GroupingConfig()
        self.logger = logger
        self._history: List[FileOperation] = []

    def _log(self, message: str, level: str = "INFO"):
        """로깅 헬퍼"""
        if self.logger:
            log_func = getattr(self.logger, level.lower(), self.logger.info)
            log_func(message)

    def _finish(self, op: FileOperation, status: str,
                problem: Optional[Problem] = None) -> FileOperation:
        """작업 상태 기록 및 이력 추가"""
        op.status = status
        op.problem = problem
        self._history.append(op)

        if problem is not None:
            level = "WARNING" if status == "duplicate" else "ERROR"
            self._log(f"{op.action.value} {status}: {problem}", level)
        elif status == "success":
            target = f" -> {op.destination}" if op.destination else ""
            self._log(f"{op.action.value} 완료: {op.source}{target}")
        else:
            self._log(f"{op.action.value} {status}: {op.source}", "DEBUG")
        return op

    def exists(self, path: Path) -> bool:
        return path_exists(Path(path))

    def ensure_directory(self, path: Path) -> FileOperation:
        """
        디렉토리 존재 확인 및 생성

        Args:
            path: 디렉토리 경로

        Returns:
            FileOperation (success: 새로 생성, skipped: 이미 존재, failed: 생성 실패)
        """
        op = FileOperation(OperationType.MKDIR, Path(path))

        if op.source.exists():
            return self._finish(op, "skipped")

        try:
            op.source.mkdir(parents=True, exist_ok=True)
            return self._finish(op, "success")
        except OSError as e:
            return self._finish(op, "failed", problems.folder_failed(op.source, e))

    def create_symlink(self, at: Path, target: Path) -> FileOperation:
        """
        심볼릭 링크 생성

        Args:
            at: 링크를 만들 위치
            target: 링크가 가리킬 경로

        Returns:
            FileOperation (at이 이미 있으면 duplicate)
        """
        op = FileOperation(OperationType.SYMLINK, Path(at), Path(target))

        if op.source == op.destination:
            return self._finish(op, "failed", problems.self_reference(op.source, op.destination))

        if self.exists(op.source):
            return self._finish(op, "duplicate", problems.duplicate_link(op.source))

        try:
            op.source.symlink_to(op.destination, target_is_directory=op.destination.is_dir())
            return self._finish(op, "success")
        except OSError as e:
            return self._finish(op, "failed", problems.link_failed(op.source, op.destination, e))

    def move_item(self, source: Path, target_dir: Path) -> FileOperation:
        """
        파일/폴더를 대상 폴더 안으로 이동

        Args:
            source: 이동할 항목
            target_dir: 대상 폴더 (이미 해석된 실제 경로)

        Returns:
            FileOperation (같은 이름이 이미 있으면 duplicate)
        """
        source = Path(source)
        target_dir = Path(target_dir)
        destination = target_dir / source.name
        op = FileOperation(OperationType.MOVE, source, destination)

        if not target_dir.is_dir():
            return self._finish(op, "failed", problems.not_a_directory(target_dir))

        # 자기 자신 또는 자신의 하위 폴더로는 이동하지 않음
        if (source == target_dir or source in target_dir.parents
                or same_item(source, destination)):
            return self._finish(op, "failed", problems.self_reference(source, destination))

        # 중복은 실제 항목을 가리킬 때만 (깨진 링크는 덮어쓰지도 않음)
        if destination.exists():
            return self._finish(op, "duplicate", problems.duplicate(source))
        if destination.is_symlink():
            return self._finish(op, "failed", problems.move_failed(
                source, target_dir, f"broken link already exists at {destination}"
            ))

        try:
            shutil.move(str(source), str(destination))
            return self._finish(op, "success")
        except (shutil.Error, OSError) as e:
            return self._finish(op, "failed", problems.move_failed(source, target_dir, e))

    def delete_item(self, path: Path) -> FileOperation:
        """
        파일, 링크 또는 폴더 트리 삭제

        config.use_recycle_bin이 켜져 있으면 시스템 휴지통으로 보냅니다.

        Args:
            path: 삭제할 경로

        Returns:
            FileOperation
        """
        path = Path(path)

        if self.config.use_recycle_bin:
            op = FileOperation(OperationType.RECYCLE, path)
            try:
                send2trash(str(path))
                return self._finish(op, "success")
            except OSError as e:
                return self._finish(op, "failed", problems.delete_failed(path, e))

        op = FileOperation(OperationType.DELETE, path)
        try:
            if path.is_symlink() or not path.is_dir():
                path.unlink()
            else:
                shutil.rmtree(path)
            return self._finish(op, "success")
        except OSError as e:
            return self._finish(op, "failed", problems.delete_failed(path, e))

    def get_history(self) -> List[FileOperation]:
        """실행 이력 반환"""
        return self._history

    def clear_history(self):
        """이력 초기화"""
        self._history = []
