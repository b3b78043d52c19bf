"""Typed configuration for a source-to-llm run.

Settings are read from a YAML file (``stl.config.yaml`` by default) and validated against a
fixed set of keys before anything else happens. Unknown keys and values of the wrong type
are rejected with a ConfigError rather than silently passed on.

Example configuration::

    gitignore: true
    ignores:
      - "dist/"
      - "*.log"
    only: []
    includeContentsHeader: false
    outputDir: ./output
    structureFilename: structure.txt
    contentsFilename: contents.txt
    exportPrompt: false
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .exceptions import ConfigError
from .exclusion_rules.ignore_ruleset import DEFAULT_CONTENTS_FILENAME, DEFAULT_STRUCTURE_FILENAME
from .types import FilterConfig, PathType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "stl.config.yaml"

DEFAULT_CONFIG = """\
gitignore: true
ignores:
  - "dist/"
  - "*.log"
only: []
includeContentsHeader: false
outputDir: ./output
structureFilename: structure.txt
contentsFilename: contents.txt
exportPrompt: false
"""

# Config file key -> (Settings field, expected type)
CONFIG_KEYS: Dict[str, Tuple[str, type]] = {
    "gitignore": ("gitignore", bool),
    "ignores": ("ignores", list),
    "only": ("only", list),
    "includeContentsHeader": ("include_contents_header", bool),
    "outputDir": ("output_dir", str),
    "structureFilename": ("structure_filename", str),
    "contentsFilename": ("contents_filename", str),
    "exportPrompt": ("export_prompt", bool),
}


@dataclass(frozen=True)
class Settings:
    """Complete, validated configuration for one run.

    Attributes:
        gitignore: Whether to apply the root's .gitignore rules.
        ignores: Extra gitignore-style exclusion patterns.
        only: Whitelist patterns. Empty means everything not ignored is included.
        include_contents_header: Whether to write the document and per-file headers.
        output_dir: Directory the output files are written to.
        structure_filename: Name of the structure document.
        contents_filename: Name of the contents document.
        export_prompt: Whether to also write the system prompt file.

    Example:
        >>> settings = Settings(ignores=("*.log",))
        >>> settings.filter_config().extra_ignore_patterns
        ('*.log',)
        >>> settings.reserved_names()
        ('structure.txt', 'contents.txt')
    """

    gitignore: bool = True
    ignores: Tuple[str, ...] = ()
    only: Tuple[str, ...] = ()
    include_contents_header: bool = True
    output_dir: Path = field(default_factory=Path.cwd)
    structure_filename: str = DEFAULT_STRUCTURE_FILENAME
    contents_filename: str = DEFAULT_CONTENTS_FILENAME
    export_prompt: bool = False

    def filter_config(self) -> FilterConfig:
        return FilterConfig(use_gitignore=self.gitignore, extra_ignore_patterns=self.ignores, only_patterns=self.only)

    def reserved_names(self) -> Tuple[str, ...]:
        """The output filenames, which a traversal must never pick up."""
        return (self.structure_filename, self.contents_filename)

    def with_output_dir(self, output_dir: PathType) -> "Settings":
        return replace(self, output_dir=Path(output_dir).resolve())

    @property
    def structure_path(self) -> Path:
        return self.output_dir / self.structure_filename

    @property
    def contents_path(self) -> Path:
        return self.output_dir / self.contents_filename


def settings_from_mapping(data: Mapping[str, Any], source: Optional[PathType] = None) -> Settings:
    """Validate a parsed configuration mapping and build Settings from it.

    Args:
        data: Mapping using the configuration file's key names.
        source: Where the mapping came from, used in error messages.

    Raises:
        ConfigError: If a key is unknown or a value has the wrong type.

    Example:
        >>> settings_from_mapping({"gitignore": False, "only": ["src/**"]}).only
        ('src/**',)
        >>> settings_from_mapping({"ignore": []})
        Traceback (most recent call last):
            ...
        source_to_llm.exceptions.ConfigError: Unknown configuration key 'ignore'
    """
    values: Dict[str, Any] = {}

    for key, value in data.items():
        if key not in CONFIG_KEYS:
            raise ConfigError(f"Unknown configuration key '{key}'", path=source)
        field_name, expected = CONFIG_KEYS[key]

        if not isinstance(value, expected):
            raise ConfigError(f"'{key}' must be of type {expected.__name__}, got {type(value).__name__}", path=source)

        if expected is list:
            if not all(isinstance(item, str) for item in value):
                raise ConfigError(f"'{key}' must be a list of strings", path=source)
            value = tuple(value)
        elif field_name == "output_dir":
            value = Path(value).resolve()
        elif expected is str and not value:
            raise ConfigError(f"'{key}' must not be empty", path=source)

        values[field_name] = value

    return Settings(**values)


def load_settings(config_path: Optional[PathType] = None) -> Settings:
    """Load settings from a YAML configuration file.

    Args:
        config_path: Explicit configuration file. If None, ``stl.config.yaml`` in the
            current directory is used when it exists, and the defaults otherwise.

    Returns:
        Settings: The validated settings.

    Raises:
        ConfigError: If an explicit file is missing, or any file fails to parse or validate.
    """
    if config_path is None:
        path = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if not path.exists():
            logger.info("%s not found, using default configuration.", DEFAULT_CONFIG_FILENAME)
            return Settings()
    else:
        path = Path(config_path).resolve()
        if not path.exists():
            raise ConfigError("Configuration file not found", path=path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not load configuration: {e}", path=path) from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration must be a mapping of keys to values", path=path)

    settings = settings_from_mapping(data, source=path)
    logger.info("Loaded configuration from: %s", path)
    return settings


def write_default_config(path: PathType) -> Path:
    """Write the starter configuration file.

    Raises:
        OSError: If the file cannot be written.
    """
    config_path = Path(path)
    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    return config_path
