"""
보고서 모듈: 실행 결과를 정렬된 텍스트로 출력
"""

from typing import Callable, Iterable

from .grouper import RunReport


# 출력 콜백 타입
OutputCallback = Callable[[str], None]


def _join(names: Iterable[str]) -> str:
    return ", ".join(sorted(names))


def render_report(report: RunReport) -> str:
    """
    그룹화 결과 보고서 생성

    Args:
        report: RunReport

    Returns:
        포맷된 보고서 (항목은 모두 정렬됨)
    """
    lines = []
    lines.append(f"{report.files_count} entries processed")
    lines.append("")
    lines.append(f"Modified: {_join(report.modified_names)}")
    lines.append("")
    lines.append(f"{len(report.new_folders)} folders created: {_join(report.new_folders)}")
    lines.append("")
    lines.append(f"{len(report.problems)} problems:")
    for problem in report.sorted_problems():
        lines.append(str(problem))

    return "\n".join(lines)


def render_alias_report(report) -> str:
    """별칭 목록 처리 결과 보고서 생성"""
    lines = [f"{report.aliases_created} aliases created for {report.folders_created} folders"]
    if report.problems:
        lines.append("")
        lines.append(f"{len(report.problems)} problems:")
        for problem in report.sorted_problems():
            lines.append(str(problem))
    return "\n".join(lines)


def print_report(report: RunReport, output: OutputCallback = print) -> None:
    output(render_report(report))


def print_log_paths(logger, output: OutputCallback = print) -> None:
    """세션 로그 저장 위치 출력"""
    log_paths = logger.get_log_paths()
    output("")
    output("로그 저장 위치:")
    output(f"   텍스트: {log_paths['text_log']}")
    output(f"   JSON: {log_paths['json_log']}")
