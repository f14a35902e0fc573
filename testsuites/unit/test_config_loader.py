import pytest
import yaml

from autotest_tools.common import ConfigurationError, get_config, reload_config, reset_config, set_config
from testsuites.ui_testing.framework.suite_config import SuiteConfig


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    for key in ("ENVIRONMENT", "UI__BASE_URL", "UI__TIMEOUT", "UI__HEADLESS", "UI__BROWSER", "UI__INVALID_EMAIL",
                "UI__INVALID_PASSWORD"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ENV", "dev")
    reset_config()
    yield
    reset_config()


def test_yaml_over_defaults(tmp_path):
    (tmp_path / "config.yaml").write_text(
        yaml.dump({"ui": {"base_url": "http://example.com", "timeout": 5}}),
        encoding="utf-8",
    )

    reload_config(tmp_path)

    assert get_config("ui.base_url") == "http://example.com"
    assert get_config("ui.timeout") == 5
    assert get_config("ui.poll_interval") == 0.25
    assert get_config("ui.retry_count", 3) == 3


def test_environment_file_and_env_override(monkeypatch, tmp_path):
    (tmp_path / "config.yaml").write_text(yaml.dump({"ui": {"timeout": 5}}), encoding="utf-8")
    (tmp_path / "staging.yaml").write_text(
        yaml.dump({"ui": {"base_url": "http://staging.example.com"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("ENV", "staging")
    monkeypatch.setenv("UI__TIMEOUT", "3")
    monkeypatch.setenv("UI__HEADLESS", "false")

    reload_config(tmp_path)
    config = SuiteConfig.from_global_config()

    assert config.base_url == "http://staging.example.com"
    assert config.timeout == 3.0
    assert config.headless is False


def test_invalid_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("ui: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        reload_config(tmp_path)


def test_non_mapping_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text(yaml.dump(["a", "b"]), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping"):
        reload_config(tmp_path)


def test_set_config_at_runtime(tmp_path):
    reload_config(tmp_path)

    set_config("ui.browser", "firefox")

    assert get_config("ui.browser") == "firefox"
    assert SuiteConfig.from_global_config().browser == "firefox"


def test_suite_config_url():
    config = SuiteConfig(base_url="https://demo.guru99.com")

    assert config.url("/test/login.html") == "https://demo.guru99.com/test/login.html"
    assert config.url("test/radio.html") == "https://demo.guru99.com/test/radio.html"
    assert config.url("https://other.example.com/x") == "https://other.example.com/x"
