#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Style override file loading for the md2view CLI.

Style files map role names to style tables. JSON, YAML and TOML files are
supported; a ``pyproject.toml`` contributes its ``[tool.md2view.styles]``
table. In any format the roles may sit at the top level or under a
``styles`` key.

Example TOML file::

    [styles.h1]
    fontSize = 40
    color = "#333"

    [styles.link]
    textDecorationLine = "none"
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict

import yaml

from md2view.exceptions import StyleConfigError

logger = logging.getLogger(__name__)

StyleOverrides = Dict[str, Dict[str, Any]]


def _read_pyproject_styles(path: Path) -> Any:
    with open(path, "rb") as f:
        data = tomllib.load(f)
    tool_section = data.get("tool", {}).get("md2view", {})
    if not isinstance(tool_section, dict):
        raise StyleConfigError(
            f"[tool.md2view] section in {path} must be a table, got {type(tool_section).__name__}",
            file_path=str(path),
        )
    return tool_section.get("styles", {})


def _read_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _validate_styles(data: Any, path: Path) -> StyleOverrides:
    """Unwrap an optional ``styles`` key and check every role maps to a table."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise StyleConfigError(
            f"Style file {path} must contain a mapping of roles, got {type(data).__name__}",
            file_path=str(path),
        )
    if isinstance(data.get("styles"), dict):
        data = data["styles"]

    styles: StyleOverrides = {}
    for role, style in data.items():
        if not isinstance(style, dict):
            raise StyleConfigError(
                f"Style for role '{role}' in {path} must be a mapping, got {type(style).__name__}",
                file_path=str(path),
            )
        styles[str(role)] = dict(style)
    return styles


def load_style_file(style_path: Path | str) -> StyleOverrides:
    """Load style overrides from a JSON, YAML, TOML or pyproject.toml file.

    The format is chosen from the file name and extension:

    - ``pyproject.toml``: the ``[tool.md2view.styles]`` table
    - ``.toml``: TOML
    - ``.yaml`` / ``.yml``: YAML
    - ``.json``: JSON

    Parameters
    ----------
    style_path : Path or str
        Path to the style file

    Returns
    -------
    dict
        Style overrides keyed by role name

    Raises
    ------
    StyleConfigError
        If the file is missing, unreadable, malformed or has an unsupported
        extension

    Examples
    --------
    >>> styles = load_style_file("styles.toml")
    >>> styles["h1"]["fontSize"]
    40

    """
    path = Path(style_path)

    if not path.exists():
        raise StyleConfigError(f"Style file does not exist: {path}", file_path=str(path))
    if not path.is_file():
        raise StyleConfigError(f"Style path is not a file: {path}", file_path=str(path))

    filename = path.name.lower()
    ext = path.suffix.lower()

    if filename == "pyproject.toml":
        reader = _read_pyproject_styles
    elif ext == ".toml":
        reader = _read_toml
    elif ext in (".yaml", ".yml"):
        reader = _read_yaml
    elif ext == ".json":
        reader = _read_json
    else:
        raise StyleConfigError(
            f"Unsupported style file format: {ext or filename}. Use .json, .toml, or .yaml",
            file_path=str(path),
        )

    try:
        data = reader(path)
    except StyleConfigError:
        raise
    except tomllib.TOMLDecodeError as e:
        raise StyleConfigError(f"Invalid TOML in style file {path}: {e}", file_path=str(path), original_error=e) from e
    except json.JSONDecodeError as e:
        raise StyleConfigError(f"Invalid JSON in style file {path}: {e}", file_path=str(path), original_error=e) from e
    except yaml.YAMLError as e:
        raise StyleConfigError(f"Invalid YAML in style file {path}: {e}", file_path=str(path), original_error=e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise StyleConfigError(f"Error reading style file {path}: {e}", file_path=str(path), original_error=e) from e

    styles = _validate_styles(data, path)
    logger.debug("Loaded %d style override(s) from %s", len(styles), path)
    return styles
