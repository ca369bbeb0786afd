"""
Unit tests for file_grouper.file_ops module.

Tests each primitive against the real file system.
"""

import os
import shutil
from pathlib import Path

from file_grouper.config import GroupingConfig
from file_grouper.file_ops import FileOperations, OperationType, path_exists
from file_grouper.problems import ProblemKind


class TestPathExists:

    def test_dangling_symlink_counts_as_existing(self, temp_dir: Path):
        link = temp_dir / "dangling"
        link.symlink_to(temp_dir / "nowhere")

        assert path_exists(link)
        assert not link.exists()

    def test_missing_path(self, temp_dir: Path):
        assert not path_exists(temp_dir / "missing")


class TestEnsureDirectory:
    """Tests for FileOperations.ensure_directory."""

    def test_creates_new_directory(self, file_ops: FileOperations, temp_dir: Path):
        op = file_ops.ensure_directory(temp_dir / "Artist")

        assert op.created
        assert op.ok
        assert (temp_dir / "Artist").is_dir()

    def test_creates_intermediate_directories(self, file_ops: FileOperations, temp_dir: Path):
        op = file_ops.ensure_directory(temp_dir / "a" / "b" / "c")

        assert op.created
        assert (temp_dir / "a" / "b" / "c").is_dir()

    def test_existing_directory_is_reused(self, file_ops: FileOperations, temp_dir: Path):
        folder = temp_dir / "Artist"
        folder.mkdir()
        (folder / "keep.txt").write_text("keep")

        op = file_ops.ensure_directory(folder)

        assert op.status == "skipped"
        assert op.ok
        assert not op.created
        assert op.problem is None
        assert (folder / "keep.txt").exists()

    def test_symlinked_directory_is_reused(self, file_ops: FileOperations, temp_dir: Path):
        real = temp_dir / "Real"
        real.mkdir()
        link = temp_dir / "Artist"
        link.symlink_to(real)

        op = file_ops.ensure_directory(link)

        assert op.status == "skipped"

    def test_failure_is_reported_not_raised(self, file_ops: FileOperations, temp_dir: Path):
        blocker = temp_dir / "Artist"
        blocker.symlink_to(temp_dir / "nowhere")

        op = file_ops.ensure_directory(blocker)

        assert op.status == "failed"
        assert op.problem.kind == ProblemKind.FOLDER_FAILED


class TestMoveItem:
    """Tests for FileOperations.move_item."""

    def test_moves_file(self, file_ops: FileOperations, temp_dir: Path, make_file):
        source = make_file("A - x.mp3")
        folder = temp_dir / "A"
        folder.mkdir()

        op = file_ops.move_item(source, folder)

        assert op.created
        assert op.destination == folder / "A - x.mp3"
        assert (folder / "A - x.mp3").read_text() == "content of A - x.mp3"
        assert not source.exists()

    def test_moves_directory_tree(self, file_ops: FileOperations, temp_dir: Path, make_file):
        source = temp_dir / "A - Album"
        source.mkdir()
        make_file("track.mp3", parent=source)
        folder = temp_dir / "A"
        folder.mkdir()

        op = file_ops.move_item(source, folder)

        assert op.created
        assert (folder / "A - Album" / "track.mp3").exists()

    def test_existing_name_is_duplicate(self, file_ops: FileOperations, temp_dir: Path, make_file):
        folder = temp_dir / "A"
        folder.mkdir()
        make_file("A - x.mp3", content="existing", parent=folder)
        source = make_file("A - x.mp3", content="new")

        op = file_ops.move_item(source, folder)

        assert op.status == "duplicate"
        assert op.problem.kind == ProblemKind.DUPLICATE
        assert source.read_text() == "new"
        assert (folder / "A - x.mp3").read_text() == "existing"

    def test_destination_not_a_directory(self, file_ops: FileOperations, temp_dir: Path, make_file):
        source = make_file("A - x.mp3")
        not_dir = make_file("A")

        op = file_ops.move_item(source, not_dir)

        assert op.status == "failed"
        assert op.problem.kind == ProblemKind.NOT_A_DIRECTORY
        assert source.exists()

    def test_refuses_to_move_into_itself(self, file_ops: FileOperations, temp_dir: Path):
        source = temp_dir / "A - Album"
        inner = source / "inner"
        inner.mkdir(parents=True)

        op = file_ops.move_item(source, inner)

        assert op.status == "failed"
        assert op.problem.kind == ProblemKind.SELF_REFERENCE
        assert inner.is_dir()

    def test_refuses_when_destination_is_the_source(self, file_ops: FileOperations, temp_dir: Path, make_file):
        source = make_file("A - x.mp3")
        (temp_dir / "A").symlink_to(".")

        op = file_ops.move_item(source, temp_dir / "A")

        assert op.status == "failed"
        assert op.problem.kind == ProblemKind.SELF_REFERENCE
        assert source.read_text() == "content of A - x.mp3"

    def test_link_to_source_is_not_a_duplicate(self, file_ops: FileOperations, temp_dir: Path, make_file):
        source = make_file("A - x.mp3")
        folder = temp_dir / "A"
        folder.mkdir()
        (folder / "A - x.mp3").symlink_to(source)

        op = file_ops.move_item(source, folder)

        assert op.problem.kind == ProblemKind.SELF_REFERENCE
        assert source.is_file()

    def test_broken_link_at_destination_is_not_a_duplicate(self, file_ops: FileOperations,
                                                           temp_dir: Path, make_file):
        source = make_file("A - x.mp3")
        folder = temp_dir / "A"
        folder.mkdir()
        (folder / "A - x.mp3").symlink_to(temp_dir / "gone")

        op = file_ops.move_item(source, folder)

        assert op.status == "failed"
        assert op.problem.kind == ProblemKind.MOVE_FAILED
        assert source.is_file()
        assert (folder / "A - x.mp3").is_symlink()

    def test_os_error_is_reported(self, file_ops: FileOperations, temp_dir: Path, make_file, monkeypatch):
        source = make_file("A - x.mp3")
        folder = temp_dir / "A"
        folder.mkdir()

        def broken_move(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(shutil, "move", broken_move)

        op = file_ops.move_item(source, folder)

        assert op.status == "failed"
        assert op.problem.kind == ProblemKind.MOVE_FAILED
        assert "disk full" in str(op.problem)


class TestCreateSymlink:
    """Tests for FileOperations.create_symlink."""

    def test_creates_link(self, file_ops: FileOperations, temp_dir: Path, make_file):
        target = make_file("A - x.mp3")
        at = temp_dir / "link.mp3"

        op = file_ops.create_symlink(at, target)

        assert op.created
        assert at.is_symlink()
        assert Path(os.readlink(at)) == target

    def test_existing_path_is_duplicate(self, file_ops: FileOperations, temp_dir: Path, make_file):
        target = make_file("A - x.mp3")
        at = make_file("link.mp3", content="already here")

        op = file_ops.create_symlink(at, target)

        assert op.status == "duplicate"
        assert op.problem.kind == ProblemKind.DUPLICATE
        assert not at.is_symlink()

    def test_dangling_link_is_duplicate(self, file_ops: FileOperations, temp_dir: Path, make_file):
        target = make_file("A - x.mp3")
        at = temp_dir / "link.mp3"
        at.symlink_to(temp_dir / "nowhere")

        op = file_ops.create_symlink(at, target)

        assert op.status == "duplicate"

    def test_refuses_link_to_itself(self, file_ops: FileOperations, temp_dir: Path):
        at = temp_dir / "self"

        op = file_ops.create_symlink(at, at)

        assert op.status == "failed"
        assert op.problem.kind == ProblemKind.SELF_REFERENCE
        assert not path_exists(at)

    def test_missing_parent_is_reported(self, file_ops: FileOperations, temp_dir: Path, make_file):
        target = make_file("A - x.mp3")

        op = file_ops.create_symlink(temp_dir / "missing" / "link.mp3", target)

        assert op.status == "failed"
        assert op.problem.kind == ProblemKind.LINK_FAILED


class TestDeleteItem:
    """Tests for FileOperations.delete_item."""

    def test_deletes_file(self, file_ops: FileOperations, make_file):
        path = make_file("A - x.mp3")

        op = file_ops.delete_item(path)

        assert op.created
        assert op.action == OperationType.DELETE
        assert not path.exists()

    def test_deletes_directory_tree(self, file_ops: FileOperations, temp_dir: Path, make_file):
        folder = temp_dir / "A - Album"
        folder.mkdir()
        make_file("track.mp3", parent=folder)

        op = file_ops.delete_item(folder)

        assert op.created
        assert not folder.exists()

    def test_deletes_symlink_not_target(self, file_ops: FileOperations, temp_dir: Path):
        real = temp_dir / "Real"
        real.mkdir()
        link = temp_dir / "A - link"
        link.symlink_to(real)

        op = file_ops.delete_item(link)

        assert op.created
        assert not path_exists(link)
        assert real.is_dir()

    def test_missing_item_is_reported(self, file_ops: FileOperations, temp_dir: Path):
        op = file_ops.delete_item(temp_dir / "missing")

        assert op.status == "failed"
        assert op.problem.kind == ProblemKind.DELETE_FAILED

    def test_recycle_bin_uses_send2trash(self, temp_dir: Path, make_file, monkeypatch):
        trashed = []
        monkeypatch.setattr("file_grouper.file_ops.send2trash", trashed.append)
        ops = FileOperations(GroupingConfig(use_recycle_bin=True))
        path = make_file("A - x.mp3")

        op = ops.delete_item(path)

        assert op.created
        assert op.action == OperationType.RECYCLE
        assert trashed == [str(path)]


class TestHistory:

    def test_every_call_is_recorded(self, file_ops: FileOperations, temp_dir: Path):
        file_ops.ensure_directory(temp_dir / "A")
        file_ops.ensure_directory(temp_dir / "A")

        history = file_ops.get_history()
        assert [op.status for op in history] == ["success", "skipped"]

        file_ops.clear_history()
        assert file_ops.get_history() == []

    def test_logs_through_logger(self, test_config: GroupingConfig, temp_dir: Path):
        messages = []

        class RecordingLogger:
            def info(self, message):
                messages.append(("INFO", message))

            def debug(self, message):
                messages.append(("DEBUG", message))

            def warning(self, message):
                messages.append(("WARNING", message))

            def error(self, message):
                messages.append(("ERROR", message))

        ops = FileOperations(test_config, RecordingLogger())
        ops.ensure_directory(temp_dir / "A")
        ops.ensure_directory(temp_dir / "A")

        assert [level for level, _ in messages] == ["INFO", "DEBUG"]
