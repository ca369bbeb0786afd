"""
로깅 모듈: 그룹화 세션 기록 (텍스트 로그 + JSON 로그)

텍스트 로그에는 작업이 일어난 순서대로 한 줄씩,
JSON 로그에는 세션 전체 기록과 마지막 실행 결과 요약이 남습니다.
"""

import logging
import json
from pathlib import Path
from datetime import datetime
from typing import Dict, List, Optional
from dataclasses import dataclass, asdict


@dataclass
class LogEntry:
    """로그 항목"""
    timestamp: str
    level: str
    action: str
    source: Optional[str] = None
    destination: Optional[str] = None
    details: Optional[Dict] = None
    error: Optional[str] = None


class GroupingLogger:
    """그룹화 세션 로거 (파일에만 기록, 콘솔 출력 없음)"""

    TEXT_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'

    def __init__(self, log_dir: Path, session_name: str = None):
        """
        Args:
            log_dir: 로그 파일 저장 디렉토리 (없으면 생성, 실패 시 OSError)
            session_name: 세션 이름 (None이면 세션 ID 사용)
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        self.session_name = session_name or self.session_id
        self.log_file = self.log_dir / f"grouping_{self.session_id}.log"
        self.json_log_file = self.log_dir / f"grouping_{self.session_id}.json"

        self.entries: List[LogEntry] = []
        self.summary: Optional[Dict] = None
        self.problems: List[Dict] = []

        self.logger = logging.getLogger(f"FileGrouper_{self.session_id}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        self.logger.handlers = []

        handler = logging.FileHandler(self.log_file, encoding='utf-8')
        handler.setFormatter(logging.Formatter(self.TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        self.logger.addHandler(handler)

        self.info("세션 시작", details={"session_id": self.session_id})

    def _record(self, level: str, action: str, source: str = None,
                destination: str = None, details: Dict = None, error: str = None):
        """항목 저장 후 텍스트 로그 한 줄 기록"""
        self.entries.append(LogEntry(
            timestamp=datetime.now().isoformat(),
            level=level,
            action=action,
            source=source,
            destination=destination,
            details=details,
            error=error,
        ))

        parts = [action]
        if source:
            parts.append(f"원본: {source}")
        if destination:
            parts.append(f"대상: {destination}")
        if details:
            parts.append(", ".join(f"{k}={v}" for k, v in details.items()))
        if error:
            parts.append(f"오류: {error}")
        self.logger.log(getattr(logging, level), " | ".join(parts))

    def debug(self, action: str, **kwargs):
        self._record("DEBUG", action, **kwargs)

    def info(self, action: str, **kwargs):
        self._record("INFO", action, **kwargs)

    def warning(self, action: str, **kwargs):
        self._record("WARNING", action, **kwargs)

    def error(self, action: str, **kwargs):
        self._record("ERROR", action, **kwargs)

    def log_report(self, report):
        """
        실행 결과 기록

        RunReport와 AliasListReport 모두 받으며, 요약은 JSON 로그의
        summary 항목에, 문제 목록은 problems 항목에 저장됩니다.
        """
        summary = {
            key: value for key, value in vars(report).items()
            if isinstance(value, (int, bool))
        }
        for key in ("modified_names", "new_folders"):
            if hasattr(report, key):
                summary[key] = sorted(getattr(report, key))

        self.summary = summary
        self.problems = [
            {"kind": problem.kind.value, "message": problem.message}
            for problem in sorted(report.problems, key=str)
        ]

        self.info("작업 요약", details={k: v for k, v in summary.items()
                                      if not isinstance(v, list)})
        for problem in self.problems:
            self.warning("문제", details=problem)

    def save_json_log(self):
        """JSON 형식 로그 저장 (실패하면 텍스트 로그에만 남김)"""
        log_data = {
            "session_id": self.session_id,
            "session_name": self.session_name,
            "start_time": self.entries[0].timestamp if self.entries else None,
            "end_time": datetime.now().isoformat(),
            "summary": self.summary,
            "problems": self.problems,
            "total_entries": len(self.entries),
            "entries": [asdict(entry) for entry in self.entries],
        }

        try:
            with open(self.json_log_file, 'w', encoding='utf-8') as f:
                json.dump(log_data, f, ensure_ascii=False, indent=2, default=str)
        except OSError as e:
            self.logger.error(f"JSON 로그 저장 실패: {e}")

    def finalize(self):
        """세션 종료: JSON 로그 저장 후 핸들러 정리"""
        self.info("세션 종료", details={"total_entries": len(self.entries)})
        self.save_json_log()

        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)

    def get_log_paths(self) -> Dict[str, Path]:
        """로그 파일 경로 반환"""
        return {
            "text_log": self.log_file,
            "json_log": self.json_log_file,
        }


def create_session_logger(base_dir: Path = None, session_name: str = None) -> GroupingLogger:
    """
    새 세션 로거 생성 헬퍼 함수

    Args:
        base_dir: 로그 기본 디렉토리 (None이면 ~/_GroupedFiles/logs)
        session_name: 세션 이름

    Returns:
        GroupingLogger 인스턴스
    """
    if base_dir is None:
        base_dir = Path.home() / "_GroupedFiles" / "logs"

    return GroupingLogger(log_dir=base_dir, session_name=session_name)
