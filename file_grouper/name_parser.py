"""
이름 분석 모듈: 파일/폴더 이름에서 그룹명과 별칭 추출

"Artist A, Artist B & Artist C - Song.mp3"
    -> 그룹명 "Artist A", 별칭 ["Artist B", "Artist C"]
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ParsedNames:
    """이름 분석 결과"""
    group_name: str
    alias_names: List[str] = field(default_factory=list)

    @property
    def all_names(self) -> List[str]:
        return [self.group_name] + self.alias_names


def parse_names(name: str, delimiter: str = " - ",
                separators: str = ",&") -> Optional[ParsedNames]:
    """
    이름을 그룹명과 별칭들로 분리

    Args:
        name: 파일/폴더 이름 (경로가 아닌 이름만)
        delimiter: 머리 부분을 잘라내는 구분자
        separators: 머리 부분 안에서 이름을 나누는 문자들

    Returns:
        ParsedNames, 구분자가 없거나 그룹명이 비어 있으면 None
    """
    parts = name.split(delimiter)
    if len(parts) < 2:
        return None

    head = parts[0]
    names = [part.strip(" ") for part in re.split(f"[{re.escape(separators)}]", head)]

    group_name = names[0]
    if not group_name:
        return None

    # 빈 이름, 그룹명과 같은 별칭, 중복 별칭은 제외
    alias_names = []
    for alias in names[1:]:
        if alias and alias != group_name and alias not in alias_names:
            alias_names.append(alias)

    return ParsedNames(group_name=group_name, alias_names=alias_names)
