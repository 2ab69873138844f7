"""Configuration management."""

import configparser
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from feiertage.errors import ConfigNotFoundError, InvalidArgumentError
from feiertage.models import HolidayType
from feiertage.translations import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "feiertage" / "config.ini"
LANGUAGE_ENV = "FEIERTAGE_LANGUAGE"
TRANSLATION_PREFIX = "translation:"


@dataclass
class Config:
    """Holiday name language and custom translations."""

    language: str = DEFAULT_LANGUAGE
    translations: dict[str, dict[str, str]] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables; empty values count as unset."""
        language = os.environ.get(LANGUAGE_ENV, "").strip()
        if not language:
            return None
        return cls(language=language)

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path, encoding="utf-8")
        translations = {}
        for section in config.sections():
            if not section.startswith(TRANSLATION_PREFIX):
                continue
            language = section.removeprefix(TRANSLATION_PREFIX)
            translations[language] = {
                HolidayType.parse(key).value: name for key, name in config[section].items()
            }

        logger.debug("Loaded configuration from %s", path)
        return cls(
            language=config.get("feiertage", "language", fallback=DEFAULT_LANGUAGE),
            translations=translations,
        )

    @classmethod
    def load_or_raise(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config":
        """Load configuration from file, raising if it does not exist."""
        config = cls.load(path)
        if config is None:
            raise ConfigNotFoundError(f"No configuration at {path}")
        return config

    @classmethod
    def resolve(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config":
        """File configuration with environment overrides, or defaults."""
        config = cls.load(path) or cls()
        env_config = cls.from_env()
        if env_config:
            config.language = env_config.language
        return config

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """
        Save configuration to file.

        INI values lose surrounding whitespace when read back, so names
        with leading or trailing whitespace are rejected.
        """
        for language, table in self.translations.items():
            for key, name in table.items():
                if name != name.strip():
                    raise InvalidArgumentError(
                        f"Name for {key} in {language!r} has surrounding whitespace: {name!r}"
                    )

        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["feiertage"] = {"language": self.language}
        for language, table in self.translations.items():
            config[f"{TRANSLATION_PREFIX}{language}"] = dict(table)
        with path.open("w", encoding="utf-8") as config_file:
            config.write(config_file)
