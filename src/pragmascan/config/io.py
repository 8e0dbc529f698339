# topmark:header:start
#
#   project      : PragmaScan
#   file         : io.py
#   file_relpath : src/pragmascan/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load PragmaScan configuration from TOML.

Sources, in order of precedence:
- an explicit file passed by the caller;
- ``pragmascan.toml`` in the working directory;
- the ``[tool.pragmascan]`` table of ``pyproject.toml`` in the working directory.

Parsing is done with `tomlkit`. The only recognized table is ``dialects``:

    [dialects.vue]
    comment_prefixes = ["<!--", "//"]
    extensions = [".vue"]

A table named after a built-in dialect only overrides the keys it sets.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pragmascan.config.logging import get_logger
from pragmascan.config.model import Config
from pragmascan.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from pragmascan.dialects.base import CommentDialect
from pragmascan.dialects.registry import get_dialect_registry
from pragmascan.errors import ConfigError

if TYPE_CHECKING:
    from pragmascan.config.logging import PragmaScanLogger

logger: PragmaScanLogger = get_logger(__name__)

TomlTable = dict[str, Any]

_LIST_KEYS: tuple[str, ...] = ("comment_prefixes", "extensions", "filenames")


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _string_tuple(value: object, *, where: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{where} must be a list of strings")
    return tuple(cast("list[str]", value))


def _dialect_from_table(name: str, table: object) -> CommentDialect:
    if not isinstance(table, dict):
        raise ConfigError(f"[dialects.{name}] must be a table")
    tbl = cast("TomlTable", table)

    unknown = set(tbl) - {*_LIST_KEYS, "description"}
    if unknown:
        raise ConfigError(f"[dialects.{name}] has unknown key(s): {', '.join(sorted(unknown))}")

    overrides: dict[str, Any] = {}
    for key in _LIST_KEYS:
        if key in tbl:
            overrides[key] = _string_tuple(tbl[key], where=f"dialects.{name}.{key}")
    if "description" in tbl:
        if not isinstance(tbl["description"], str):
            raise ConfigError(f"dialects.{name}.description must be a string")
        overrides["description"] = tbl["description"]

    base = get_dialect_registry().get(name)
    if base is not None:
        logger.debug("Overriding built-in dialect %s: %s", name, sorted(overrides))
        return dataclasses.replace(base, **overrides)

    prefixes = overrides.pop("comment_prefixes", ())
    if not any(prefixes):
        raise ConfigError(f"[dialects.{name}] must define non-empty comment_prefixes")
    return CommentDialect(name=name, comment_prefixes=prefixes, **overrides)


def config_from_dict(data: TomlTable, *, source: Path | None = None) -> Config:
    """Build a [`Config`][pragmascan.config.model.Config] from a parsed TOML table.

    Raises:
        ConfigError: If the table has the wrong shape.
    """
    raw = data.get("dialects", {})
    if not isinstance(raw, dict):
        raise ConfigError("'dialects' must be a table")

    dialects: dict[str, CommentDialect] = {}
    for name, table in cast("TomlTable", raw).items():
        dialects[name] = _dialect_from_table(name, table)

    return Config(dialects=dialects, source=source)


def discover_config_file(cwd: Path) -> Path | None:
    """Return the configuration file PragmaScan would use in ``cwd``, if any."""
    candidate = cwd / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate

    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        tool = load_toml_dict(pyproject).get("tool", {})
        if isinstance(tool, dict) and PYPROJECT_TOOL_SECTION in tool:
            return pyproject
    return None


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> Config:
    """Load configuration from ``path`` or discover it in ``cwd``.

    Args:
        path (Path | None): Explicit configuration file.
        cwd (Path | None): Directory searched when ``path`` is None; defaults
            to the process working directory.

    Returns:
        Config: The loaded configuration, or defaults when nothing was found.

    Raises:
        ConfigError: If the configuration file is unreadable or malformed.
    """
    if path is None:
        path = discover_config_file(cwd or Path.cwd())
        if path is None:
            logger.debug("No configuration file found; using built-in dialects")
            return Config.from_defaults()

    data = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        tool = data.get("tool", {})
        data = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
        if not isinstance(data, dict):
            raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] must be a table")

    logger.info("Loaded configuration from %s", path)
    return config_from_dict(cast("TomlTable", data), source=path)
