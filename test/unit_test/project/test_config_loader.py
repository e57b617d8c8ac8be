"""Tests for project configuration discovery and merging."""

from __future__ import annotations

import pytest

from projectkit.project import (
    ConfigLoadError,
    ConfigNotResolvedError,
    ConfigValidationError,
    ProjectConfig,
    ProjectConfigLoader,
    merge_configs,
)

HOME = "/home/dev"
WORK = "/home/dev/work/app"
NAME = ".projectkit.yaml"

HOME_CONFIG = """\
agents:
  - kind: claude
rulebook:
  sources:
    - uri: local://rulebooks/general
ai:
  skill:
    sources:
      - uri: local://home-skills
doc:
  standard:
    sources:
      - uri: local://home-standards
    render:
      - destination: docs
        format: markdown
"""

WORK_CONFIG = """\
agents:
  - kind: cursor
    options:
      mode: strict
ai:
  skill:
    sources:
      - uri: local://skills
  mcp:
    sources:
      - uri: local://mcp
doc:
  standard:
    render:
      - destination: site
        format: html
"""


def _loader(memory_fs, work=WORK, home=HOME) -> ProjectConfigLoader:
    return ProjectConfigLoader(
        fs=memory_fs,
        work_dir_fn=lambda: work,
        home_dir_fn=lambda: home,
        config_file_name=NAME,
    )


class TestResolvePaths:
    def test_home_before_working_directory(self, memory_fs, write_text):
        write_text(f"{WORK}/{NAME}", WORK_CONFIG)
        write_text(f"{HOME}/{NAME}", HOME_CONFIG)

        assert _loader(memory_fs).resolve_paths() == [f"{HOME}/{NAME}", f"{WORK}/{NAME}"]

    def test_same_directory_is_loaded_once(self, memory_fs, write_text):
        write_text(f"{HOME}/{NAME}", HOME_CONFIG)

        assert _loader(memory_fs, work=HOME + "/").resolve_paths() == [f"{HOME}/{NAME}"]

    def test_unavailable_home_is_skipped(self, memory_fs, write_text):
        write_text(f"{WORK}/{NAME}", WORK_CONFIG)

        def no_home() -> str:
            raise RuntimeError("could not determine home directory")

        loader = ProjectConfigLoader(
            fs=memory_fs, work_dir_fn=lambda: WORK, home_dir_fn=no_home, config_file_name=NAME
        )

        assert loader.resolve_paths() == [f"{WORK}/{NAME}"]

    def test_not_resolved(self, memory_fs):
        with pytest.raises(ConfigNotResolvedError) as exc_info:
            _loader(memory_fs).resolve_paths()

        assert exc_info.value.candidates == [f"{HOME}/{NAME}", f"{WORK}/{NAME}"]


class TestLoad:
    def test_merges_home_then_working_directory(self, memory_fs, write_text):
        write_text(f"{HOME}/{NAME}", HOME_CONFIG)
        write_text(f"{WORK}/{NAME}", WORK_CONFIG)

        config = _loader(memory_fs).load()

        assert [agent.kind for agent in config.agents] == ["claude", "cursor"]
        assert config.agents[1].options == {"mode": "strict"}
        assert config.rulebook.uris() == ["local://rulebooks/general"]
        assert config.ai.skill.uris() == ["local://home-skills", "local://skills"]
        assert config.ai.mcp.uris() == ["local://mcp"]
        assert config.ai.instruction.uris() == []
        assert config.doc.standard.uris() == ["local://home-standards"]
        assert [render.destination for render in config.doc.standard.render] == ["docs", "site"]

    def test_empty_file(self, memory_fs, write_text):
        write_text(f"{WORK}/{NAME}", "")

        config = _loader(memory_fs).load()

        assert config.agents == []
        assert config.ai.workflow.sources == []

    def test_invalid_yaml(self, memory_fs, write_text):
        write_text(f"{WORK}/{NAME}", "agents: [unclosed\n")

        with pytest.raises(ConfigLoadError) as exc_info:
            _loader(memory_fs).load()

        assert exc_info.value.path == f"{WORK}/{NAME}"
        assert str(exc_info.value).endswith("invalid yaml")

    def test_not_a_mapping(self, memory_fs, write_text):
        write_text(f"{WORK}/{NAME}", "- agents\n")

        with pytest.raises(ConfigLoadError):
            _loader(memory_fs).load()

    @pytest.mark.parametrize(
        "content",
        [
            "agents:\n  - kind: ''\n",
            "ai:\n  skill:\n    sources:\n      - uri: no-scheme\n",
            "doc:\n  standard:\n    render:\n      - format: markdown\n",
        ],
    )
    def test_validation_errors(self, memory_fs, write_text, content):
        write_text(f"{WORK}/{NAME}", content)

        with pytest.raises(ConfigValidationError) as exc_info:
            _loader(memory_fs).load()

        assert exc_info.value.violations

    def test_defaults_to_configured_file_name(self, memory_fs, write_text, monkeypatch):
        monkeypatch.setenv("PROJECTKIT_CONFIG_FILE_NAME", "kit.yml")
        write_text(f"{WORK}/kit.yml", WORK_CONFIG)

        loader = ProjectConfigLoader(fs=memory_fs, work_dir_fn=lambda: WORK, home_dir_fn=lambda: HOME)

        assert loader.resolve_paths() == [f"{WORK}/kit.yml"]


def test_merge_of_nothing_has_every_section():
    config = merge_configs([])

    assert config == merge_configs([ProjectConfig()])
    assert config.rulebook.sources == []
    assert config.ai.skill.sources == []
    assert config.doc.standard.render == []
