"""
별칭 목록 모듈: 이름 목록 파일로 폴더와 별칭 링크 일괄 생성

파일 형식 (한 줄에 한 폴더):

    Real Name, Other Name, Nickname
    Another Name

각 줄의 첫 이름으로 폴더를 만들고, 나머지 이름은 그 폴더를 가리키는
심볼릭 링크로 같은 위치에 만듭니다.
"""

from pathlib import Path
from typing import List, Optional, Set
from dataclasses import dataclass, field

from . import problems
from .config import GroupingConfig
from .file_ops import FileOperations
from .problems import Problem


@dataclass
class AliasListReport:
    """별칭 목록 처리 결과"""
    folders_created: int = 0
    aliases_created: int = 0
    problems: Set[Problem] = field(default_factory=set)
    aborted: bool = False

    def add_problem(self, problem: Optional[Problem]):
        if problem is not None:
            self.problems.add(problem)

    def sorted_problems(self) -> List[Problem]:
        return sorted(self.problems, key=str)


def parse_names_line(line: str, separator: str = ",") -> List[str]:
    """한 줄을 이름 리스트로 분리 (앞뒤 공백 제거, 빈 이름 제외)"""
    return [name.strip() for name in line.split(separator) if name.strip()]


def read_names_file(names_file: Path, separator: str = ",") -> List[List[str]]:
    """
    이름 목록 파일 읽기

    Raises:
        OSError, UnicodeDecodeError: 파일을 읽을 수 없는 경우
    """
    with open(names_file, 'r', encoding='utf-8') as f:
        content = f.read()

    rows = []
    for line in content.splitlines():
        names = parse_names_line(line, separator)
        if names:
            rows.append(names)
    return rows


def create_aliases_from_list(output_folder: Path, names_file: Path,
                             file_ops: FileOperations = None,
                             config: GroupingConfig = None,
                             logger=None) -> AliasListReport:
    """
    이름 목록 파일로 폴더와 별칭 생성

    Args:
        output_folder: 폴더와 링크를 만들 위치
        names_file: 이름 목록 파일
        file_ops: 파일 작업 객체 (None이면 자동 생성)
        config: 설정 객체
        logger: 로거 객체

    Returns:
        AliasListReport
    """
    config = config or GroupingConfig()
    file_ops = file_ops or FileOperations(config, logger)
    output_folder = Path(output_folder)
    report = AliasListReport()

    try:
        rows = read_names_file(Path(names_file), config.list_separator)
    except (OSError, UnicodeDecodeError) as e:
        report.add_problem(problems.names_file_unreadable(names_file, e))
        report.aborted = True
        if logger:
            logger.error("이름 목록 파일 읽기 실패", source=str(names_file), error=str(e))
        return report

    if logger:
        logger.info("별칭 생성 시작", details={"output": str(output_folder), "lines": len(rows)})

    for names in rows:
        folder = output_folder / names[0]

        if file_ops.exists(folder):
            # 기존 폴더는 그대로 쓰고 중복으로만 보고
            report.add_problem(problems.duplicate_link(folder))
        else:
            op = file_ops.ensure_directory(folder)
            if op.created:
                report.folders_created += 1
            report.add_problem(op.problem)

        for alias in names[1:]:
            op = file_ops.create_symlink(output_folder / alias, folder)
            if op.created:
                report.aliases_created += 1
            report.add_problem(op.problem)

    if logger:
        logger.info("별칭 생성 완료", details={
            "folders": report.folders_created,
            "aliases": report.aliases_created,
            "problems": len(report.problems),
        })

    return report
