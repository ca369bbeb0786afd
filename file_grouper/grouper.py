"""
그룹화 엔진: 폴더를 스캔해 이름별 그룹 폴더로 이동하고 별칭 링크 생성
"""

from pathlib import Path
from typing import Iterable, List, Optional, Set
from dataclasses import dataclass, field

from . import problems
from .config import GroupingConfig
from .duplicate_policy import on_duplicate_move
from .file_ops import FileOperations
from .link_resolver import InvalidDestination, resolve_link
from .name_parser import ParsedNames, parse_names
from .problems import Problem


@dataclass
class RunReport:
    """그룹화 실행 결과"""
    files_count: int = 0
    modified_names: Set[str] = field(default_factory=set)
    new_folders: Set[str] = field(default_factory=set)
    problems: Set[Problem] = field(default_factory=set)
    aborted: bool = False

    def add_problem(self, problem: Optional[Problem]):
        if problem is not None:
            self.problems.add(problem)

    def add_problems(self, found: Iterable[Problem]):
        for problem in found:
            self.add_problem(problem)

    def sorted_problems(self) -> List[Problem]:
        return sorted(self.problems, key=str)


class FileGrouper:
    """
    파일 그룹화 클래스

    "그룹명, 별칭 - 제목" 형식의 항목을 그룹 폴더로 이동하고
    별칭 폴더마다 원본을 가리키는 심볼릭 링크를 만듭니다.
    항목 하나의 실패는 보고서에 기록될 뿐 다른 항목 처리를 막지 않습니다.
    """

    def __init__(self, config: GroupingConfig = None, logger=None,
                 file_ops: FileOperations = None):
        """
        Args:
            config: 설정 객체 (None이면 기본 설정 사용)
            logger: 로거 객체 (None이면 로깅 안 함)
            file_ops: 파일 작업 객체 (None이면 자동 생성)
        """
        self.config = config or GroupingConfig()
        self.logger = logger
        self.file_ops = file_ops or FileOperations(self.config, logger)

    def _log(self, message: str, level: str = "INFO", **kwargs):
        """로깅 헬퍼"""
        if self.logger:
            log_func = getattr(self.logger, level.lower(), self.logger.info)
            log_func(message, **kwargs)

    def list_entries(self, directory: Path) -> List[Path]:
        """대상 폴더의 바로 아래 항목 목록 (이동 전에 전부 읽어 둠)"""
        return list(directory.iterdir())

    def parse(self, entry: Path) -> Optional[ParsedNames]:
        return parse_names(entry.name, self.config.name_delimiter,
                           self.config.alias_separators)

    def group(self, target_directory: Path = None,
              delete_duplicates: bool = None) -> RunReport:
        """
        대상 폴더 그룹화 실행

        Args:
            target_directory: 대상 폴더 (None이면 config에서 가져옴)
            delete_duplicates: 중복 원본 삭제 여부 (None이면 config에서 가져옴)

        Returns:
            RunReport
        """
        if target_directory is None:
            target_directory = self.config.target_directory
        if delete_duplicates is None:
            delete_duplicates = self.config.delete_duplicates

        target_directory = Path(target_directory)
        report = RunReport()

        self._log("그룹화 시작", details={
            "path": str(target_directory),
            "delete_duplicates": delete_duplicates,
        })

        try:
            entries = self.list_entries(target_directory)
        except OSError as e:
            # 유일한 치명적 오류
            report.add_problem(problems.listing_failed(target_directory, e))
            report.aborted = True
            self._log("폴더 목록 읽기 실패", "ERROR", source=str(target_directory), error=str(e))
            return report

        for entry in entries:
            names = self.parse(entry)
            if names is None:
                continue
            self.group_entry(target_directory, entry, names, delete_duplicates, report)

        self._log("그룹화 완료", details={
            "files": report.files_count,
            "new_folders": len(report.new_folders),
            "problems": len(report.problems),
        })

        return report

    def _ensure_folder(self, directory: Path, name: str, report: RunReport) -> Path:
        """그룹/별칭 폴더 확보 및 보고서 기록"""
        folder = directory / name
        op = self.file_ops.ensure_directory(folder)
        if op.created:
            report.new_folders.add(name)
        report.add_problem(op.problem)
        report.modified_names.add(name)
        return folder

    def group_entry(self, directory: Path, entry: Path, names: ParsedNames,
                    delete_duplicates: bool, report: RunReport):
        """
        항목 하나 처리: 그룹 폴더로 이동 후 별칭 링크 생성

        Args:
            directory: 대상 폴더
            entry: 처리할 항목
            names: 항목 이름 분석 결과
            delete_duplicates: 중복 원본 삭제 여부
            report: 결과를 누적할 보고서
        """
        report.files_count += 1
        self._log("항목 처리", "DEBUG", source=str(entry), details={
            "group": names.group_name,
            "aliases": names.alias_names,
        })

        group_folder = self._ensure_folder(directory, names.group_name, report)

        try:
            group_target = resolve_link(group_folder)
        except InvalidDestination as e:
            report.add_problem(problems.invalid_destination(group_folder, e.reason))
            group_target = None
            unresolved = e.reason

        if group_target is not None:
            op = self.file_ops.move_item(entry, group_target)
            if op.status == "duplicate":
                report.add_problems(on_duplicate_move(
                    entry, op.destination, delete_duplicates, self.file_ops
                ))
            else:
                report.add_problem(op.problem)

        # 이동 결과와 관계없이 모든 별칭에 링크 시도
        for alias in names.alias_names:
            alias_folder = self._ensure_folder(directory, alias, report)
            if group_target is None:
                report.add_problem(problems.link_failed(
                    alias_folder / entry.name, group_folder / entry.name, unresolved
                ))
                continue
            self.link_alias(alias_folder, group_target / entry.name, report)

    def link_alias(self, alias_folder: Path, target: Path, report: RunReport):
        """별칭 폴더 안에 원본을 가리키는 링크 생성"""
        requested = alias_folder / target.name
        try:
            link_path = resolve_link(alias_folder) / target.name
        except InvalidDestination as e:
            report.add_problem(problems.invalid_destination(alias_folder, e.reason))
            return

        op = self.file_ops.create_symlink(link_path, target)
        if op.status == "duplicate":
            # 해석된 경로가 아니라 요청한 경로로 보고
            report.add_problem(problems.duplicate_link(requested))
        else:
            report.add_problem(op.problem)


def group_files(target_directory: Path, delete_duplicates: bool = False,
                config: GroupingConfig = None, logger=None) -> RunReport:
    """
    그룹화 유틸리티 함수

    Args:
        target_directory: 대상 폴더
        delete_duplicates: 중복 원본 삭제 여부
        config: 설정 객체
        logger: 로거 객체

    Returns:
        RunReport
    """
    grouper = FileGrouper(config, logger)
    return grouper.group(target_directory, delete_duplicates)
