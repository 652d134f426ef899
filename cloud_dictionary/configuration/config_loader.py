from pathlib import Path

import yaml
from pydantic import ValidationError

from cloud_dictionary.configuration.entities.dictionary_config import DictionaryConfig
from cloud_dictionary.logging.logger import log


def load_config(config_path: str | Path) -> DictionaryConfig:
    """
    Load and validate a dictionary store configuration file.

    :param config_path: Path to the configuration YAML file
    :return: Parsed configuration object
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with config_file.open() as f:
            config_data = yaml.safe_load(f) or {}
        config = DictionaryConfig.model_validate(config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}") from e
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    log.set_level(config.log_level)
    return config
