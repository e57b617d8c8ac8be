from __future__ import annotations

import pytest

from projectkit.project import ProjectRootNotFoundError, find_project_root

HOME = "/home/dev"
NAME = ".projectkit.yaml"


def test_git_directory_marks_root(memory_fs):
    memory_fs.make_dirs(f"{HOME}/app/.git")
    memory_fs.make_dirs(f"{HOME}/app/src/pkg")

    root = find_project_root(memory_fs, f"{HOME}/app/src/pkg", HOME, NAME)

    assert root.base == f"{HOME}/app"


def test_config_file_marks_root(memory_fs, write_text):
    write_text(f"{HOME}/mono/{NAME}", "")
    memory_fs.make_dirs(f"{HOME}/mono/svc/.git")

    assert find_project_root(memory_fs, f"{HOME}/mono/svc/lib", HOME, NAME).base == f"{HOME}/mono/svc"


def test_start_directory_can_be_root(memory_fs, write_text):
    write_text(f"{HOME}/app/{NAME}", "")

    assert find_project_root(memory_fs, f"{HOME}/app", HOME, NAME).base == f"{HOME}/app"


def test_git_file_is_not_a_root(memory_fs, write_text):
    write_text(f"{HOME}/app/.git", "gitdir: ../.git/modules/app")

    with pytest.raises(ProjectRootNotFoundError):
        find_project_root(memory_fs, f"{HOME}/app", HOME, NAME)


def test_stops_at_home(memory_fs, write_text):
    write_text(f"{HOME}/{NAME}", "")
    memory_fs.make_dirs(f"{HOME}/scratch")

    with pytest.raises(ProjectRootNotFoundError) as exc_info:
        find_project_root(memory_fs, f"{HOME}/scratch", HOME, NAME)

    assert exc_info.value.start_dir == f"{HOME}/scratch"


def test_stops_at_filesystem_root(memory_fs):
    memory_fs.make_dirs("/srv/data")

    with pytest.raises(ProjectRootNotFoundError):
        find_project_root(memory_fs, "/srv/data", HOME, NAME)


def test_root_view_reads_project_files(memory_fs, write_text):
    write_text(f"{HOME}/app/{NAME}", "agents: []\n")

    root = find_project_root(memory_fs, f"{HOME}/app", HOME, NAME)

    assert root.read_file(NAME) == b"agents: []\n"
