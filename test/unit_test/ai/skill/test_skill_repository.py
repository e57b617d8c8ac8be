"""Tests for the skill repository."""

from __future__ import annotations

import base64
import json

import pytest

from projectkit.ai.skill import (
    Script,
    Skill,
    SkillAlreadyExistsError,
    SkillFsRepository,
    SkillMetadata,
    SkillNotFoundError,
)
from projectkit.resource import ResourceAlreadyExistsError


def _skill(name: str, description: str = "A skill.", **kwargs) -> Skill:
    return Skill(metadata=SkillMetadata(name=name, description=description), instructions="Do it.", **kwargs)


@pytest.fixture
def repository(memory_fs) -> SkillFsRepository:
    return SkillFsRepository(memory_fs)


def test_get_all_sorted_by_name(repository):
    for name in ["review", "deploy", "lint"]:
        repository.add_skill(_skill(name))

    assert [skill.metadata.name for skill in repository.get_all()] == ["deploy", "lint", "review"]


def test_duplicate_name_is_rejected(repository):
    repository.add_skill(_skill("review", "first"))

    with pytest.raises(SkillAlreadyExistsError) as info:
        repository.add_skill(_skill("review", "second"))

    assert isinstance(info.value, ResourceAlreadyExistsError)
    assert [skill.metadata.description for skill in repository.get_all()] == ["first"]


def test_get_skill_by_name(repository):
    repository.add_skill(_skill("review"))
    repository.add_skill(_skill("deploy"))

    assert repository.get_skill_by_name("deploy").metadata.name == "deploy"


@pytest.mark.parametrize("stored", [[], ["review"]])
def test_get_skill_by_name_not_found(repository, stored):
    for name in stored:
        repository.add_skill(_skill(name))

    with pytest.raises(SkillNotFoundError, match="'deploy'"):
        repository.get_skill_by_name("deploy")


def test_binary_scripts_survive_storage(repository, memory_fs):
    skill = _skill(
        "review",
        scripts={"check.sh": Script(content_type="application/x-sh", content=b"\x00\xffexit 0")},
    )

    repository.add_skill(skill)

    assert repository.get_skill_by_name("review") == skill
    (filename,) = [entry.name for entry in memory_fs.list_dir()]
    stored = json.loads(memory_fs.read_file(filename))
    assert stored["scripts"]["check.sh"]["contentType"] == "application/x-sh"
    content = stored["scripts"]["check.sh"]["content"]
    assert base64.b64decode(content, validate=True) == b"\x00\xffexit 0"


def test_script_content_uses_standard_base64(repository, memory_fs):
    repository.add_skill(_skill("review", scripts={"run": Script(content_type="text/plain", content=b"\xfb\xff")}))

    (filename,) = [entry.name for entry in memory_fs.list_dir()]
    stored = json.loads(memory_fs.read_file(filename))
    assert stored["scripts"]["run"]["content"] == "+/8="
    assert repository.get_all()[0].scripts["run"].content == b"\xfb\xff"


def test_script_content_in_memory_is_not_decoded():
    assert Script(content_type="text/plain", content=b"+/8=").content == b"+/8="


def test_remove_all_twice(repository):
    repository.add_skill(_skill("review"))

    repository.remove_all()
    repository.remove_all()

    assert repository.get_all() == []


def test_get_skill_by_name_after_remove_all(repository):
    repository.add_skill(_skill("review"))
    repository.remove_all()

    with pytest.raises(SkillNotFoundError):
        repository.get_skill_by_name("review")


def test_remove_all_then_add_again(repository):
    repository.add_skill(_skill("review"))

    repository.remove_all()
    repository.add_skill(_skill("review"))

    assert len(repository.get_all()) == 1
