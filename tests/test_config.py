"""Tests for authoring_aid.config -- YAML loading, defaults and logging setup."""

import pytest
import yaml
from loguru import logger
from pydantic import ValidationError

from authoring_aid.config import (
    Config,
    ConfigManager,
    LoggingConfig,
    StyleConfig,
    configure_logging,
    get_config,
    init_config,
)


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data))
    return path


class TestDefaults:

    def test_default_values(self):
        config = Config()
        assert config.contrast.fix_target_ratio == 4.5
        assert config.readability.words_per_minute == 200
        assert config.readability.gauge_max_grade == 15
        assert config.style.max_sentence_length == 200
        assert config.style.allowed_token_characters == "a-zA-Z0-9.,!?'-"
        assert config.logging.level == "INFO"
        assert config.logging.file is None

    def test_no_file_uses_defaults(self, isolated_config):
        manager = ConfigManager()
        assert manager.config_path is None
        assert manager.get_config() == Config()

    def test_global_config_without_file(self, isolated_config):
        assert get_config() == Config()


class TestLoading:

    def test_explicit_path(self, isolated_config):
        path = write_yaml(isolated_config / "custom.yaml", {
            "readability": {"words_per_minute": 250},
            "style": {"max_sentence_length": 120},
        })
        config = ConfigManager(str(path)).get_config()
        assert config.readability.words_per_minute == 250
        assert config.style.max_sentence_length == 120
        assert config.contrast.fix_target_ratio == 4.5

    def test_finds_config_in_working_directory(self, isolated_config):
        write_yaml(isolated_config / "config.yaml", {"contrast": {"fix_target_ratio": 7.0}})
        assert get_config().contrast.fix_target_ratio == 7.0

    def test_project_file_preferred(self, isolated_config):
        write_yaml(isolated_config / "config.yaml", {"contrast": {"fix_target_ratio": 7.0}})
        write_yaml(isolated_config / "authoring_aid.yaml", {"contrast": {"fix_target_ratio": 3.0}})
        assert ConfigManager().get_config().contrast.fix_target_ratio == 3.0

    def test_init_config_replaces_global(self, isolated_config):
        path = write_yaml(isolated_config / "a.yaml", {"logging": {"level": "DEBUG"}})
        init_config(str(path))
        assert get_config().logging.level == "DEBUG"

    def test_empty_file_gives_defaults(self, isolated_config):
        path = isolated_config / "empty.yaml"
        path.write_text("")
        assert ConfigManager(str(path)).get_config() == Config()

    def test_reload(self, isolated_config):
        path = write_yaml(isolated_config / "r.yaml", {"readability": {"words_per_minute": 100}})
        manager = ConfigManager(str(path))
        write_yaml(path, {"readability": {"words_per_minute": 300}})
        manager.reload_config()
        assert manager.get_config().readability.words_per_minute == 300

    def test_example_config_is_valid(self):
        from pathlib import Path
        example = Path(__file__).parent.parent / "config.example.yaml"
        assert ConfigManager(str(example)).get_config() == Config()


class TestErrors:

    def test_missing_explicit_file(self, isolated_config):
        with pytest.raises(FileNotFoundError):
            ConfigManager(str(isolated_config / "missing.yaml"))

    @pytest.mark.parametrize("data", [
        {"readability": {"words_per_minute": "fast"}},
        {"readability": {"words_per_minute": 0}},
        {"readability": {"words_per_minute": -50}},
        {"readability": {"gauge_max_grade": 0}},
        {"style": {"max_sentence_length": -1}},
        {"style": {"allowed_token_characters": "a-z\\"}},
        {"style": {"allowed_token_characters": "^a-z"}},
        {"style": {"allowed_token_characters": ""}},
        {"style": {"allowed_token_characters": "z-a"}},
    ])
    def test_invalid_value(self, isolated_config, data):
        path = write_yaml(isolated_config / "bad.yaml", data)
        with pytest.raises(ValidationError):
            ConfigManager(str(path))

    def test_zero_sentence_length_allowed(self):
        assert StyleConfig(max_sentence_length=0).max_sentence_length == 0

    def test_escaped_backslash_allowed(self):
        assert StyleConfig(allowed_token_characters="a-z\\\\").allowed_token_characters == "a-z\\\\"

    def test_malformed_yaml(self, isolated_config):
        path = isolated_config / "broken.yaml"
        path.write_text("style: [unclosed")
        with pytest.raises(yaml.YAMLError):
            ConfigManager(str(path))


class TestConfigureLogging:

    def test_file_sink(self, tmp_path, restore_logging):
        log_file = tmp_path / "logs" / "aid.log"
        configure_logging(LoggingConfig(level="debug", file=str(log_file)))
        logger.debug("written to file")
        logger.remove()
        assert "written to file" in log_file.read_text()

    def test_level_filters(self, tmp_path, restore_logging):
        log_file = tmp_path / "aid.log"
        configure_logging(LoggingConfig(level="WARNING", file=str(log_file)))
        logger.info("too quiet")
        logger.warning("loud enough")
        logger.remove()
        contents = log_file.read_text()
        assert "loud enough" in contents
        assert "too quiet" not in contents
