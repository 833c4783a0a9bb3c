"""
Tests for configuration loading — defaults and demo-ci.yml overrides.
"""

import textwrap
from pathlib import Path

import pytest

from demo_ci.core.config.defaults import JOB_TEMPLATE, PLACEHOLDER, default_config
from demo_ci.core.config.loader import ConfigError, find_config_file, load_config
from demo_ci.core.models.pipeline import PipelineConfig


@pytest.fixture
def override_yml(tmp_path: Path) -> Path:
    """A demo-ci.yml replacing the exclusions and one variant."""
    content = textwrap.dedent("""\
        excluded:
          - path: 2d/x
            reason: "Too slow on CI"
          - path: gui/theming
        variants:
          - name: default
            output_file: default.yml
            setup: |
                    - name: Setup
                      run: echo setup
    """)
    path = tmp_path / "demo-ci.yml"
    path.write_text(content)
    return path


class TestDefaultConfig:
    def test_discovery_rules(self):
        config = default_config()
        assert config.marker_file == "project.godot"
        assert config.required_dirs == ["2d", "3d", "networking"]
        assert config.skip_dirs == ["mono", "plugins"]
        assert config.hidden_prefix == "."

    def test_variants(self):
        config = default_config()
        assert [v.name for v in config.variants] == ["default", "sanitizers"]
        assert [v.output_file for v in config.variants] == [
            "ci_data_default.txt",
            "ci_data_sanitizers.txt",
        ]
        assert all(v.description for v in config.variants)

    def test_exclusions(self):
        config = default_config()
        assert len(config.excluded) == 8
        assert all(e.reason for e in config.excluded)
        assert config.is_excluded("misc/2.5d")

    def test_job_template_has_placeholder(self):
        assert PLACEHOLDER in JOB_TEMPLATE

    def test_fresh_instance_each_call(self):
        a = default_config()
        a.excluded.clear()
        assert len(default_config().excluded) == 8


class TestLoadConfig:
    def test_none_returns_defaults(self):
        assert load_config(None) == default_config()

    def test_overrides_merge(self, override_yml: Path):
        config = load_config(override_yml)
        assert [e.path for e in config.excluded] == ["2d/x", "gui/theming"]
        assert config.excluded[0].reason == "Too slow on CI"
        assert config.excluded[1].reason == ""
        assert [v.name for v in config.variants] == ["default"]
        assert config.variants[0].setup == "- name: Setup\n  run: echo setup\n"
        # Untouched keys keep their default
        assert config.marker_file == "project.godot"
        assert config.job_template == JOB_TEMPLATE

    def test_empty_file_is_defaults(self, tmp_path: Path):
        path = tmp_path / "demo-ci.yml"
        path.write_text("")
        assert load_config(path) == default_config()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "demo-ci.yml"
        path.write_text("excluded: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "demo-ci.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(path)

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "demo-ci.yml"
        path.write_text("exclusions: []\n")
        with pytest.raises(ConfigError, match="Unknown keys.*exclusions"):
            load_config(path)

    def test_invalid_shape(self, tmp_path: Path):
        path = tmp_path / "demo-ci.yml"
        path.write_text("variants:\n  - name: only-a-name\n")
        with pytest.raises(ConfigError, match="Invalid pipeline configuration"):
            load_config(path)

    def test_bare_exclusion_paths(self, tmp_path: Path):
        path = tmp_path / "demo-ci.yml"
        path.write_text("excluded:\n  - 3d/y\n  - path: 2d/x\n    reason: slow\n")
        config = load_config(path)
        assert [(e.path, e.reason) for e in config.excluded] == [("3d/y", ""), ("2d/x", "slow")]
        assert config.is_excluded("3d/y")

    @pytest.mark.parametrize("key", ["hidden_prefix", "placeholder"])
    def test_empty_token_rejected(self, tmp_path: Path, key: str):
        path = tmp_path / "demo-ci.yml"
        path.write_text(f"{key}: \"\"\n")
        with pytest.raises(ConfigError, match=key):
            load_config(path)

    def test_error_chained(self, tmp_path: Path):
        path = tmp_path / "demo-ci.yml"
        path.write_text("skip_dirs: 12\n")
        with pytest.raises(ConfigError) as exc:
            load_config(path)
        assert exc.value.__cause__ is not None


class TestFindConfigFile:
    def test_found(self, override_yml: Path):
        assert find_config_file(override_yml.parent) == override_yml

    def test_absent(self, tmp_path: Path):
        assert find_config_file(tmp_path) is None

    def test_directory_ignored(self, tmp_path: Path):
        (tmp_path / "demo-ci.yml").mkdir()
        assert find_config_file(tmp_path) is None


class TestPipelineConfig:
    def test_is_excluded_exact(self):
        config = PipelineConfig(excluded=[{"path": "3d/y"}])
        assert config.is_excluded("3d/y")
        assert not config.is_excluded("3d/y/")
        assert not config.is_excluded("3d")

    def test_bare_string_exclusion(self):
        config = PipelineConfig(excluded=["3d/y", {"path": "2d/x", "reason": "slow"}])
        assert config.excluded[0].path == "3d/y"
        assert config.excluded[1].reason == "slow"
