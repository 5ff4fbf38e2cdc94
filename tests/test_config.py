import pytest
import yaml

from formula.config import ConfigError, FormulaConfig, load_config


class TestLoadConfig:
    def test_loads_valid_config(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({
            "install": {"prefix": "/opt/keg", "source": "/tmp/claude-notify-1.0.0"},
            "dependencies": {"check": False},
            "verify": {"timeout": 3},
            "debug": {"enabled": True},
        }))
        config = load_config(str(config_file))
        assert config.install.prefix == "/opt/keg"
        assert config.install.source == "/tmp/claude-notify-1.0.0"
        assert config.dependencies.check is False
        assert config.verify.timeout == 3
        assert config.debug.enabled is True

    def test_none_returns_defaults(self):
        assert load_config(None) == FormulaConfig()

    def test_missing_file_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            load_config("/nonexistent/config.yaml")

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        config = load_config(str(config_file))
        assert config.install.prefix is None
        assert config.install.source == "."
        assert config.dependencies.check is True
        assert config.verify.timeout == 10

    def test_null_sections_use_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("install:\nverify:\n")
        config = load_config(str(config_file))
        assert config.verify.timeout == 10

    def test_invalid_yaml_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("install: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(str(config_file))

    def test_non_mapping_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(str(config_file))

    def test_non_positive_timeout_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"verify": {"timeout": 0}}))
        with pytest.raises(ConfigError, match="timeout"):
            load_config(str(config_file))

    def test_null_source_uses_default(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("install:\n  source:\n  prefix:\n")
        config = load_config(str(config_file))
        assert config.install.source == "."
        assert config.install.prefix is None

    def test_non_string_prefix_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"install": {"prefix": 42}}))
        with pytest.raises(ConfigError, match="install.prefix"):
            load_config(str(config_file))

    def test_non_string_source_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"install": {"source": ["a", "b"]}}))
        with pytest.raises(ConfigError, match="install.source"):
            load_config(str(config_file))

    def test_string_flag_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text('dependencies:\n  check: "false"\n')
        with pytest.raises(ConfigError, match="dependencies.check"):
            load_config(str(config_file))

    def test_null_flag_uses_default(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("dependencies:\n  check:\ndebug:\n  enabled:\n")
        config = load_config(str(config_file))
        assert config.dependencies.check is True
        assert config.debug.enabled is False
