"""
Tests for configuration models and the configuration loader.
"""

import logging

import pytest
from pydantic import ValidationError

from testscaffold.config.loader import ConfigLoader, ConfigurationError, load_config
from testscaffold.config.models import (
    DiscoveryConfig,
    GenerationConfig,
    LoggingConfig,
    ScaffoldConfig,
)


class TestConfigModels:
    """Defaults and validators."""

    def test_defaults(self):
        config = ScaffoldConfig()

        assert config.generation.output_dir_name == "GeneratedTests"
        assert config.generation.file_extension == ".py"
        assert config.generation.test_framework_import == "import pytest"
        assert config.generation.mock_framework_import == "from unittest.mock import Mock"
        assert config.discovery.modules == []
        assert config.discovery.skip_unintrospectable is False
        assert config.logging.level == "INFO"

    def test_extension_requires_dot(self):
        with pytest.raises(ValidationError, match="must start with"):
            GenerationConfig(file_extension="py")

    def test_mock_template_requires_placeholder(self):
        with pytest.raises(ValidationError, match="type_name"):
            GenerationConfig(mock_template="Mock()")

    def test_result_name_must_be_identifier(self):
        with pytest.raises(ValidationError):
            GenerationConfig(result_name="not valid")

    def test_modules_accept_comma_separated_string(self):
        config = DiscoveryConfig(modules="pkg.a, pkg.b,")

        assert config.modules == ["pkg.a", "pkg.b"]

    def test_log_level_is_normalized(self):
        config = LoggingConfig(level="debug")

        assert config.level == "DEBUG"
        assert config.level_number == logging.DEBUG

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestConfigLoader:
    """Merging of files, environment and CLI overrides."""

    def test_defaults_without_sources(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = ConfigLoader().load_config()

        assert config == ScaffoldConfig()

    def test_loads_toml_file(self, tmp_path):
        config_file = tmp_path / "scaffold.toml"
        config_file.write_text(
            '[generation]\noutput_dir_name = "Scaffolds"\n'
            '[discovery]\nmodules = ["pkg.models"]\n',
            encoding="utf-8",
        )

        config = ConfigLoader(config_file).load_config()

        assert config.generation.output_dir_name == "Scaffolds"
        assert config.discovery.modules == ["pkg.models"]

    def test_loads_yaml_file(self, tmp_path):
        config_file = tmp_path / "scaffold.yaml"
        config_file.write_text(
            "generation:\n  import_subject: true\nlogging:\n  level: warning\n",
            encoding="utf-8",
        )

        config = ConfigLoader(config_file).load_config()

        assert config.generation.import_subject is True
        assert config.logging.level == "WARNING"

    def test_discovers_default_file_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / ".testscaffold.toml").write_text(
            '[generation]\nresult_name = "actual"\n', encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        config = ConfigLoader().load_config()

        assert config.generation.result_name == "actual"

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "scaffold.toml"
        config_file.write_text(
            '[generation]\noutput_dir_name = "FromFile"\n', encoding="utf-8"
        )
        monkeypatch.setenv("TESTSCAFFOLD_GENERATION__OUTPUT_DIR_NAME", "FromEnv")
        monkeypatch.setenv("TESTSCAFFOLD_DISCOVERY__MODULES", "pkg.a,pkg.b")
        monkeypatch.setenv("TESTSCAFFOLD_DISCOVERY__SKIP_UNINTROSPECTABLE", "yes")

        config = ConfigLoader(config_file).load_config()

        assert config.generation.output_dir_name == "FromEnv"
        assert config.discovery.modules == ["pkg.a", "pkg.b"]
        assert config.discovery.skip_unintrospectable is True

    def test_reserved_environment_variables_ignored(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TESTSCAFFOLD_QUIET", "1")
        monkeypatch.setenv("TESTSCAFFOLD_UI", "minimal")

        assert ConfigLoader().load_config() == ScaffoldConfig()

    def test_cli_overrides_win(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TESTSCAFFOLD_GENERATION__OUTPUT_DIR_NAME", "FromEnv")

        config = load_config(cli_overrides={"generation": {"output_dir_name": "FromCli"}})

        assert config.generation.output_dir_name == "FromCli"

    def test_result_is_cached(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        loader = ConfigLoader()

        assert loader.load_config() is loader.load_config()

    def test_invalid_value_raises_configuration_error(self, tmp_path):
        config_file = tmp_path / "scaffold.toml"
        config_file.write_text('[generation]\nfile_extension = "py"\n', encoding="utf-8")

        with pytest.raises(ConfigurationError, match="validation failed"):
            ConfigLoader(config_file).load_config()

    def test_malformed_toml_raises_configuration_error(self, tmp_path):
        config_file = tmp_path / "scaffold.toml"
        config_file.write_text("[generation\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            ConfigLoader(config_file).load_config()

    def test_malformed_yaml_raises_configuration_error(self, tmp_path):
        config_file = tmp_path / "scaffold.yml"
        config_file.write_text("generation: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader(config_file).load_config()

    def test_missing_explicit_file_raises_configuration_error(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to read"):
            ConfigLoader(tmp_path / "absent.toml").load_config()

    def test_non_table_file_raises_configuration_error(self, tmp_path):
        config_file = tmp_path / "scaffold.yaml"
        config_file.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="table of settings"):
            ConfigLoader(config_file).load_config()

    def test_read_env_settings_nests_on_double_underscore(self):
        settings = ConfigLoader().read_env_settings(
            {
                "TESTSCAFFOLD_GENERATION__EXTRA_LITERALS__FLOAT": "0.0",
                "TESTSCAFFOLD_LOGGING__LEVEL": "debug",
                "TESTSCAFFOLD_UI": "minimal",
                "OTHER": "ignored",
            }
        )

        assert settings == {
            "generation": {"extra_literals": {"float": "0.0"}},
            "logging": {"level": "debug"},
        }

    def test_env_overrides_argument_replaces_environment(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TESTSCAFFOLD_GENERATION__OUTPUT_DIR_NAME", "FromEnv")

        config = ConfigLoader().load_config(
            env_overrides={"generation": {"output_dir_name": "Given"}}
        )

        assert config.generation.output_dir_name == "Given"
