#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the mdexport CLI.

Configuration can live in ``.mdexport.toml``, ``.mdexport.yaml``,
``.mdexport.yml``, ``.mdexport.json`` or the ``[tool.mdexport]`` table of a
``pyproject.toml``. Keys are ``MarkdownExportOptions`` field names, e.g.::

    # .mdexport.toml
    vault_root = "/Users/me/Notes/"
    category_tags = ["Person", "Project"]

"""

import json
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from mdexport.constants import CONFIG_FILENAMES
from mdexport.exceptions import ConfigError

CONFIG_ENV_VAR = "MDEXPORT_CONFIG"

_DEDICATED_CONFIG_FILENAMES = [name for name in CONFIG_FILENAMES if name != "pyproject.toml"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.mdexport] table from a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict if there is none

    Raises
    ------
    ConfigError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get("mdexport", {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.mdexport] section in {pyproject_path} must be a table, got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Dedicated ``.mdexport.*`` files win over ``pyproject.toml`` in the same
    directory; a ``pyproject.toml`` only counts if it has a
    ``[tool.mdexport]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in _DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError:
                # unreadable pyproject.toml, keep searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the parents of ``start_dir`` or the home directory."""
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in _DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    ConfigError
        If the file is missing, cannot be parsed, or is not a mapping

    """
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}", str(path))

    if path.name == "pyproject.toml":
        return _load_pyproject_section(path)

    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with open(path, "rb") as f:
                config = tomllib.load(f)
        elif suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        elif suffix in (".yaml", ".yml"):
            with open(path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        else:
            raise ConfigError(f"Unsupported configuration format: {path.suffix}", str(path))
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}", str(path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading configuration file {path}: {e}", str(path), e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping, got {type(config).__name__}", str(path))
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries, ``override`` winning on conflicts.

    Nested dictionaries are merged recursively.

    Examples
    --------
    >>> merge_configs({"vault_root": "/a/", "strict": True}, {"vault_root": "/b/"})
    {'vault_root': '/b/', 'strict': True}

    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config_with_priority(explicit_path: Optional[str] = None, start_dir: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):

    1. ``explicit_path`` (the ``--config`` flag)
    2. the file named by the ``MDEXPORT_CONFIG`` environment variable
    3. a discovered configuration file

    Returns
    -------
    dict
        Configuration, empty if no file was found

    """
    if explicit_path:
        return load_config_file(explicit_path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return load_config_file(env_path)

    discovered = discover_config_file(start_dir)
    if discovered:
        return load_config_file(discovered)
    return {}


__all__ = [
    "CONFIG_ENV_VAR",
    "discover_config_file",
    "find_config_in_parents",
    "load_config_file",
    "load_config_with_priority",
    "merge_configs",
]
