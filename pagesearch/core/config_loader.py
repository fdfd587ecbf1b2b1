"""
Configuration loader for the page search engine.

Loads settings from config.json and provides typed access via dataclasses.
Supports singleton pattern for global access and runtime reload capability.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional

from .exceptions import ConfigurationError


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    data_directory: Path
    database_path: Path
    logs_directory: Path


@dataclass
class IndexingConfig:
    """Configuration for page indexing behavior."""
    supported_extensions: List[str]
    encoding: str
    max_file_size_mb: int
    flush_unterminated_pages: bool
    log_progress_every: int


@dataclass
class DatabaseConfig:
    """SQLite connection settings."""
    timeout_seconds: float
    journal_mode: str
    synchronous: str


@dataclass
class SearchConfig:
    """Configuration for search functionality."""
    empty_query_matches_all: bool
    snippet_length: int


@dataclass
class GUIConfig:
    """Configuration for Streamlit web interface."""
    page_title: str
    results_per_page: int


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int


DEFAULTS = {
    "paths": {
        "data_directory": "data",
        "database_path": "output/index.sqlite",
        "logs_directory": "output/logs",
    },
    "indexing": {
        "supported_extensions": [".txt"],
        "encoding": "utf-8",
        "max_file_size_mb": 500,
        "flush_unterminated_pages": True,
        "log_progress_every": 100,
    },
    "database": {
        "timeout_seconds": 10.0,
        "journal_mode": "WAL",
        "synchronous": "NORMAL",
    },
    "search": {
        "empty_query_matches_all": False,
        "snippet_length": 300,
    },
    "gui": {
        "page_title": "Page Search",
        "results_per_page": 20,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "max_file_size_mb": 10,
        "backup_count": 5,
    },
}


def _build(section_cls, values: dict):
    """Instantiate a section dataclass, ignoring keys it does not declare."""
    known = {f.name for f in fields(section_cls)}
    return section_cls(**{k: v for k, v in values.items() if k in known})


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    indexing: IndexingConfig
    database: DatabaseConfig
    search: SearchConfig
    gui: GUIConfig
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            ) from e

        project_root = config_path.resolve().parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def defaults(cls, project_root: Path = None) -> "Config":
        """Build a Config with every section at its default value."""
        return cls._parse_config({}, Path(project_root or Path.cwd()))

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object, filling gaps from DEFAULTS."""
        sections = {
            name: {**defaults, **data.get(name, {})}
            for name, defaults in DEFAULTS.items()
        }

        paths = sections["paths"]
        sections["paths"] = {
            key: cls._resolve_path(value, project_root) for key, value in paths.items()
        }

        return cls(
            paths=_build(PathsConfig, sections["paths"]),
            indexing=_build(IndexingConfig, sections["indexing"]),
            database=_build(DatabaseConfig, sections["database"]),
            search=_build(SearchConfig, sections["search"]),
            gui=_build(GUIConfig, sections["gui"]),
            logging=_build(LoggingConfig, sections["logging"]),
            project_root=project_root
        )

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute() or path_str == ":memory:":
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        _config_instance = Config.from_file(config_path)

    return _config_instance


def _find_config_file() -> Path:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigurationError(
        "Could not find config/config.json in current directory or parents"
    )


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)
