"""
설정 모듈: 그룹화 도구 전역 설정 및 기본값 정의
"""

from pathlib import Path
from dataclasses import dataclass, field


# 아카이브 기본 경로
DEFAULT_ARCHIVE_ROOT = Path("/Volumes/Archives")


@dataclass
class GroupingConfig:
    """파일 그룹화 도구 설정 클래스"""

    # 그룹화 대상 폴더
    target_directory: Path = field(default_factory=lambda: DEFAULT_ARCHIVE_ROOT / "Sets")

    # 별칭 목록 파일 (create-aliases 용)
    names_file: Path = field(default_factory=lambda: DEFAULT_ARCHIVE_ROOT / "Names.txt")

    # 이동 대상이 이미 있으면 원본 삭제
    delete_duplicates: bool = False

    # 삭제 대신 휴지통 사용 여부
    use_recycle_bin: bool = False

    # 그룹명과 나머지 이름을 나누는 구분자
    name_delimiter: str = " - "

    # 그룹명 부분을 다시 나누는 문자들 (첫 번째가 그룹, 나머지가 별칭)
    alias_separators: str = ",&"

    # 별칭 목록 파일의 한 줄 안에서 이름 구분자
    list_separator: str = ","

    # 로그 파일 경로
    log_dir: Path = field(default=None)

    def __post_init__(self):
        """초기화 후 처리"""
        self.target_directory = Path(self.target_directory)
        self.names_file = Path(self.names_file)
        if self.log_dir is None:
            self.log_dir = Path.home() / "_GroupedFiles" / "logs"
        else:
            self.log_dir = Path(self.log_dir)
