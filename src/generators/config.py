"""
Generator configuration: default locale, seed, and data location.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import UnsupportedLocaleError
from .locales import DEFAULT_LOCALE, is_supported


@dataclass
class GeneratorConfig:
    """Configuration shared by definition stores and table generators."""
    default_locale: str = DEFAULT_LOCALE
    random_seed: Optional[int] = None
    definitions_path: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if not is_supported(self.default_locale):
            raise UnsupportedLocaleError(self.default_locale)
        if self.definitions_path is not None:
            self.definitions_path = Path(self.definitions_path)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.INFO)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorConfig":
        return cls(
            default_locale=data.get("default_locale", DEFAULT_LOCALE),
            random_seed=data.get("random_seed"),
            definitions_path=data.get("definitions_path"),
            log_level=data.get("log_level", "INFO"),
        )


def load_config(config_path: Union[str, Path]) -> GeneratorConfig:
    """Load a GeneratorConfig from a YAML file."""
    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}
    return GeneratorConfig.from_dict(data)
