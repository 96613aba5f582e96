import pytest

from utils import config
from utils.config import MissingConfigException, get_config


@pytest.fixture
def memberhub_yml(tmp_path, monkeypatch):
    def write(content):
        path = tmp_path / "memberhub.yml"
        path.write_text(content)
        monkeypatch.setenv("MEMBERHUB_YML", str(path))
        config._load_yaml_config.cache_clear()
        return path

    yield write
    config._load_yaml_config.cache_clear()


def test_get_config_reads_nested_keys(memberhub_yml):
    memberhub_yml("setup:\n  graphql:\n    max_depth: 7\n")
    assert get_config("setup", "graphql", "max_depth") == 7
    assert get_config("setup", "graphql") == {"max_depth": 7}


def test_get_config_default_when_missing(memberhub_yml):
    memberhub_yml("setup:\n  graphql:\n    max_depth: 7\n")
    assert get_config("setup", "graphql", "max_aliases", default=15) == 15
    assert get_config("setup", "graphql", "max_depth", "nested") is None
    assert get_config("services", "sentry", default="x") == "x"


def test_get_config_without_file(tmp_path, monkeypatch):
    monkeypatch.setenv("MEMBERHUB_YML", str(tmp_path / "missing.yml"))
    config._load_yaml_config.cache_clear()
    assert get_config("setup", "debug", default=False) is False
    config._load_yaml_config.cache_clear()


def test_get_config_empty_file(memberhub_yml):
    memberhub_yml("")
    assert get_config("setup", default="fallback") == "fallback"


def test_get_config_rejects_non_mapping(memberhub_yml):
    memberhub_yml("- a\n- b\n")
    with pytest.raises(MissingConfigException):
        get_config("setup")


@pytest.mark.parametrize(
    "raw, expected",
    [("9", 9), ("false", False), ("0.5", 0.5), ("[a, b]", ["a", "b"]), ("text", "text")],
)
def test_env_overrides_file(memberhub_yml, monkeypatch, raw, expected):
    memberhub_yml("setup:\n  graphql:\n    max_depth: 7\n")
    monkeypatch.setenv("SETUP__GRAPHQL__MAX_DEPTH", raw)
    assert get_config("setup", "graphql", "max_depth") == expected


def test_settings_module_is_selected_from_run_env():
    assert config.get_settings_module() in {
        module.value for module in config.SettingsModule
    }


def test_get_config_walks_loaded_mapping(mocker):
    mocker.patch(
        "utils.config._load_yaml_config",
        return_value={"services": {"database": {"port": 6543}}},
    )
    assert get_config("services", "database", "port") == 6543
    assert get_config("services", "database", "host", default="localhost") == (
        "localhost"
    )
