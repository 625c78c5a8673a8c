import pytest
from pathlib import Path

from gaugefiles.config.loader import load_discovery_config, resolve_project_root
from gaugefiles.config.settings import DEFAULT_SPEC_EXTENSIONS, split_list_value
from gaugefiles.exceptions import ConfigError


def test_defaults_without_config_files(tmp_path: Path):
    config = load_discovery_config(tmp_path, environ={})
    assert config.project_root == tmp_path
    assert config.spec_extensions == DEFAULT_SPEC_EXTENSIONS
    assert config.concepts_paths == []
    assert config.data_dir == "."


def test_project_toml_settings_are_applied(tmp_path: Path):
    (tmp_path / "gaugefiles.toml").write_text(
        'spec_file_extensions = ["SPEC", ".feature"]\n'
        'concepts_dir = ["concepts", "shared/concepts"]\n'
        'data_dir = "resources"\n'
    )
    config = load_discovery_config(tmp_path, environ={})
    assert config.spec_extensions == (".spec", ".feature")
    assert config.concepts_paths == ["concepts", "shared/concepts"]
    assert config.data_dir == "resources"


def test_pyproject_tool_table_is_read(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.gaugefiles]\nconcepts_dir = "a, b"\n'
    )
    config = load_discovery_config(tmp_path, environ={})
    assert config.concepts_paths == ["a", "b"]


def test_environment_overrides_toml(tmp_path: Path):
    (tmp_path / ".gaugefiles.toml").write_text('data_dir = "resources"\nconcepts_dir = ["from_file"]\n')
    environ = {
        "gauge_spec_file_extensions": ".md",
        "gauge_concepts_dir": "from_env, other",
        "gauge_data_dir": "testdata",
    }
    config = load_discovery_config(tmp_path, environ=environ)
    assert config.spec_extensions == (".md",)
    assert config.concepts_paths == ["from_env", "other"]
    assert config.data_dir == "testdata"


def test_invalid_toml_raises_config_error(tmp_path: Path):
    (tmp_path / "gaugefiles.toml").write_text("this is = = not toml")
    with pytest.raises(ConfigError):
        load_discovery_config(tmp_path, environ={})


def test_project_root_from_environment(tmp_path: Path):
    environ = {"GAUGE_PROJECT_ROOT": str(tmp_path)}
    assert resolve_project_root(None, environ) == tmp_path
    assert resolve_project_root(tmp_path / "explicit", environ) == tmp_path / "explicit"
    assert resolve_project_root(None, {}) is None
    assert load_discovery_config(None, environ={}).project_root is None


def test_environment_overrides_are_read_lazily(tmp_path: Path):
    environ = {}
    config = load_discovery_config(tmp_path, environ=environ)
    assert config.specs_dirs == []
    environ["gauge_specs_dir"] = "specs, more_specs"
    assert config.specs_dirs == ["specs", "more_specs"]


def test_split_list_value():
    assert split_list_value(" a, ,b ,") == ["a", "b"]
    assert split_list_value("") == []
    assert split_list_value(None) == []
