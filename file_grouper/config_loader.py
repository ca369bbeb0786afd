"""
YAML 설정 파일 로더
"""

import yaml
from pathlib import Path
from typing import Dict, Any
from .config import GroupingConfig


def load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """
    YAML 설정 파일 로드

    Args:
        config_path: YAML 파일 경로

    Returns:
        설정 딕셔너리
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"설정 파일을 찾을 수 없습니다: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"설정 파일 형식 오류: {config_path}: {e}") from e

    if config_data is None:
        return {}
    if not isinstance(config_data, dict):
        raise ValueError(f"설정 파일 최상위는 키-값 형식이어야 합니다: {config_path}")

    return config_data


def expand_path(path_str: str) -> Path:
    """경로 확장 (~/ 처리)"""
    return Path(path_str).expanduser().resolve()


def create_config_from_yaml(yaml_path: Path) -> GroupingConfig:
    """
    YAML 파일에서 GroupingConfig 생성

    예시 파일:

        target_directory: ~/Archives/Sets
        names_file: ~/Archives/Names.txt
        delete_duplicates: false
        use_recycle_bin: true
        log_dir: ~/_GroupedFiles/logs
        parsing:
          name_delimiter: " - "
          alias_separators: ",&"
          list_separator: ","

    Args:
        yaml_path: YAML 설정 파일 경로

    Returns:
        GroupingConfig 인스턴스
    """
    data = load_yaml_config(yaml_path)
    config = GroupingConfig()

    if data.get('target_directory'):
        config.target_directory = expand_path(data['target_directory'])

    if data.get('names_file'):
        config.names_file = expand_path(data['names_file'])

    if data.get('log_dir'):
        config.log_dir = expand_path(data['log_dir'])

    config.delete_duplicates = bool(data.get('delete_duplicates', False))
    config.use_recycle_bin = bool(data.get('use_recycle_bin', False))

    # 이름 파싱 설정
    parsing = data.get('parsing') or {}
    if not isinstance(parsing, dict):
        raise ValueError(f"parsing 항목은 키-값 형식이어야 합니다: {yaml_path}")
    if parsing.get('name_delimiter'):
        config.name_delimiter = parsing['name_delimiter']
    if parsing.get('alias_separators'):
        config.alias_separators = parsing['alias_separators']
    if parsing.get('list_separator'):
        config.list_separator = parsing['list_separator']

    return config
