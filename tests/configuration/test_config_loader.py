import logging

import pytest
import yaml

from cloud_dictionary.configuration.config_loader import load_config
from cloud_dictionary.configuration.entities.dictionary_config import CollectionsConfig, DictionaryConfig
from cloud_dictionary.logging.logger import log


class TestConfigLoader:
    @pytest.fixture(autouse=True)
    def restore_log_level(self):
        level = log.logger.level
        yield
        log.logger.setLevel(level)

    def test_load_config(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text(
            yaml.safe_dump(
                {
                    "log_level": "debug",
                    "db": {"db_name": "words", "host": "mongo", "port": 27018, "username": "u", "password": "p"},
                    "collections": {"definitions": "defs"},
                }
            )
        )

        config = load_config(config_file)

        assert config.log_level == "DEBUG"
        assert log.logger.level == logging.DEBUG
        assert config.db.db_name == "words"
        assert config.db.host == "mongo"
        assert config.db.port == 27018
        assert config.collections.definitions == "defs"
        assert config.collections.counter == "counter"
        assert config.collections.definition_of_the_day == "definition_of_the_day"

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("")

        assert load_config(config_file) == DictionaryConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yml")

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("db: [unclosed")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(config_file)

    def test_invalid_log_level(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("log_level: chatty\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(config_file)

    def test_collections_must_differ(self):
        with pytest.raises(ValueError):
            DictionaryConfig(collections=CollectionsConfig(definitions="same", counter="same"))

    def test_empty_collection_name(self):
        with pytest.raises(ValueError):
            CollectionsConfig(counter=" ")
