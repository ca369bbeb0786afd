"""
문제 보고 모듈: 항목별 실패를 문자열 대신 종류가 있는 값으로 표현
"""

from dataclasses import dataclass
from enum import Enum


class ProblemKind(Enum):
    """문제 유형"""
    LISTING_FAILED = "listing_failed"
    NAMES_FILE_UNREADABLE = "names_file_unreadable"
    FOLDER_FAILED = "folder_failed"
    NOT_A_DIRECTORY = "not_a_directory"
    MOVE_FAILED = "move_failed"
    LINK_FAILED = "link_failed"
    DUPLICATE = "duplicate"
    DUPLICATE_DELETED = "duplicate_deleted"
    DELETE_FAILED = "delete_failed"
    INVALID_DESTINATION = "invalid_destination"
    SELF_REFERENCE = "self_reference"


@dataclass(frozen=True)
class Problem:
    """보고서에 들어가는 문제 한 건 (값이 같으면 한 번만 기록됨)"""
    kind: ProblemKind
    message: str

    def __str__(self) -> str:
        return self.message


def listing_failed(directory, error) -> Problem:
    return Problem(ProblemKind.LISTING_FAILED,
                   f"Could not get contents of directory at {directory}: {error}")


def names_file_unreadable(path, error) -> Problem:
    return Problem(ProblemKind.NAMES_FILE_UNREADABLE,
                   f"Could not read names file {path}: {error}")


def folder_failed(path, error) -> Problem:
    return Problem(ProblemKind.FOLDER_FAILED,
                   f"Error creating directory {path}: {error}")


def not_a_directory(path) -> Problem:
    return Problem(ProblemKind.NOT_A_DIRECTORY,
                   f"Destination ({path}) is not a directory")


def move_failed(source, destination, error) -> Problem:
    return Problem(ProblemKind.MOVE_FAILED,
                   f"Failed to move {source.name} to {destination}: {error}")


def link_failed(at, target, error) -> Problem:
    return Problem(ProblemKind.LINK_FAILED,
                   f"Error creating alias at {at} for {target}: {error}")


def duplicate(path) -> Problem:
    return Problem(ProblemKind.DUPLICATE, f"Duplicate: {path.name}")


def duplicate_link(path) -> Problem:
    return Problem(ProblemKind.DUPLICATE,
                   f"Duplicate: File/link {path} already exists")


def duplicate_deleted(path) -> Problem:
    return Problem(ProblemKind.DUPLICATE_DELETED,
                   f"Duplicate: {path.name} (deleted)")


def delete_failed(path, error) -> Problem:
    return Problem(ProblemKind.DELETE_FAILED,
                   f"Failed to delete duplicate: {path.name}: {error}")


def invalid_destination(path, error) -> Problem:
    return Problem(ProblemKind.INVALID_DESTINATION,
                   f"Destination is not a valid path: {path} ({error})")


def self_reference(source, destination) -> Problem:
    return Problem(ProblemKind.SELF_REFERENCE,
                   f"Refusing to move or link {source} onto itself ({destination})")
