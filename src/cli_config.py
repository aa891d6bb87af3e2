"""Loading browserslist queries from the environment and config files.

Lookup order:

1. ``BROWSERSLIST`` environment variable (a query string).
2. An explicit config file (``Opts.config`` or ``BROWSERSLIST_CONFIG``).
3. The nearest ``.browserslistrc``, ``browserslist`` or ``package.json`` with
   a ``browserslist`` key, searching upward from ``Opts.path``.
4. ``["defaults"]``.

Config files may be split into environment sections; the section is picked
by ``Opts.env``, ``BROWSERSLIST_ENV``, ``NODE_ENV`` and finally
``production``, with ``defaults`` used when the section is missing.
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from versioning.errors import ConfigError
from versioning.models import Opts

logger = logging.getLogger(__name__)

_SECTION = re.compile(r"^\s*\[(.+)\]\s*$")
_COMMENT = re.compile(r"#[^\n]*")
_LINE_SPLIT = re.compile(r"\n|,")

# Section name -> queries; a plain list when the config has no sections.
ConfigValue = Union[List[str], Dict[str, List[str]]]


def parse_rc(text: str) -> Dict[str, List[str]]:
    """Parse ``.browserslistrc`` content into environment sections.

    Lines before the first ``[section]`` header belong to ``defaults``. A
    header may name several space separated environments.

    Raises:
        ConfigError: A section is declared twice.
    """
    result: Dict[str, List[str]] = {"defaults": []}
    sections = ["defaults"]
    for line in _LINE_SPLIT.split(_COMMENT.sub("", text)):
        line = line.strip()
        if not line:
            continue
        header = _SECTION.match(line)
        if header:
            sections = header.group(1).strip().split()
            for section in sections:
                if section in result:
                    raise ConfigError(f"Duplicate section {section} in Browserslist config")
                result[section] = []
        else:
            for section in sections:
                result[section].append(line)
    return result


def _normalize(value: Any, source: str) -> ConfigValue:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    if isinstance(value, dict):
        return {str(key): _normalize_section(item, source) for key, item in value.items()}
    raise ConfigError(f"Unsupported browserslist config value in {source}", source)


def _normalize_section(value: Any, source: str) -> List[str]:
    normalized = _normalize(value, source)
    if isinstance(normalized, dict):
        raise ConfigError(f"Nested browserslist sections are not supported in {source}", source)
    return normalized


def _read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}", path) from exc


def _package_browserslist(path: str) -> Optional[ConfigValue]:
    """Return the ``browserslist`` key of a package.json, or None when absent."""
    try:
        data = json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}", path) from exc
    if not isinstance(data, dict):
        return None
    if "browserlist" in data:
        raise ConfigError(
            f"Browserslist config should be saved in browserslist key, not browserlist, in {path}",
            path,
        )
    if Constants.PACKAGE_JSON_KEY not in data:
        return None
    return _normalize(data[Constants.PACKAGE_JSON_KEY], path)


def _structured_config(path: str) -> ConfigValue:
    text = _read_text(path)
    try:
        if path.lower().endswith(".json"):
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}", path) from exc
    if data is None:
        return []
    if isinstance(data, dict) and Constants.PACKAGE_JSON_KEY in data:
        data = data[Constants.PACKAGE_JSON_KEY]
    return _normalize(data, path)


def read_config(path: str) -> ConfigValue:
    """Read an explicitly named config file.

    ``package.json`` files use their ``browserslist`` key, ``.yml``/``.yaml``
    and ``.json`` files are structured documents, anything else is parsed as
    ``.browserslistrc`` text.
    """
    if not os.path.isfile(path):
        raise ConfigError(f"Can't read {path} config", path)
    base = os.path.basename(path)
    if base == Constants.PACKAGE_JSON_FILE:
        found = _package_browserslist(path)
        if found is None:
            raise ConfigError(f"{path} has no browserslist key", path)
        return found
    if base.lower().endswith((".yml", ".yaml", ".json")):
        return _structured_config(path)
    return parse_rc(_read_text(path))


def find_config(start: str) -> Optional[ConfigValue]:
    """Search ``start`` and its parents for the nearest browserslist config.

    Raises:
        ConfigError: One directory holds more than one config source.
    """
    directory = os.path.abspath(start)
    if os.path.isfile(directory):
        directory = os.path.dirname(directory)
    while True:
        rc_path = os.path.join(directory, Constants.RC_FILE)
        plain_path = os.path.join(directory, Constants.PLAIN_CONFIG_FILE)
        package_path = os.path.join(directory, Constants.PACKAGE_JSON_FILE)

        package_value = _package_browserslist(package_path) if os.path.isfile(package_path) else None
        has_rc = os.path.isfile(rc_path)
        has_plain = os.path.isfile(plain_path)

        if has_plain and package_value is not None:
            raise ConfigError(f"{directory} contains both browserslist and package.json with browsers", directory)
        if has_rc and package_value is not None:
            raise ConfigError(f"{directory} contains both .browserslistrc and package.json with browsers", directory)
        if has_plain and has_rc:
            raise ConfigError(f"{directory} contains both .browserslistrc and browserslist", directory)

        for candidate, present in ((plain_path, has_plain), (rc_path, has_rc)):
            if present:
                _log_source(candidate)
                return parse_rc(_read_text(candidate))
        if package_value is not None:
            _log_source(package_path)
            return package_value

        parent = os.path.dirname(directory)
        if parent == directory:
            return None
        directory = parent


def _log_source(path: str) -> None:
    if is_debug_enabled(logger):
        logger.debug(
            "Browserslist config found",
            extra=extra_context(event="config_found", component="config", action="load", target=path),
        )


def current_env(opts: Opts) -> str:
    """Return the environment name used to pick a config section."""
    return (
        opts.env
        or os.environ.get(Constants.ENV_ENV)
        or os.environ.get(Constants.ENV_NODE_ENV)
        or Constants.DEFAULT_ENV
    )


def pick_env(config: ConfigValue, env: str) -> Optional[List[str]]:
    """Select the queries for ``env`` from a possibly sectioned config."""
    if isinstance(config, list):
        return config
    sections: Mapping[str, List[str]] = config
    if env in sections:
        return sections[env]
    return sections.get("defaults")


def load_config(opts: Optional[Opts] = None) -> List[str]:
    """Return the queries that apply to ``opts``.

    Raises:
        ConfigError: A config file is unreadable, malformed or ambiguous.
    """
    opts = opts or Opts()
    from_env = os.environ.get(Constants.ENV_QUERIES)
    if from_env:
        return [from_env]

    config_path = opts.config or os.environ.get(Constants.ENV_CONFIG)
    if config_path:
        config: Optional[ConfigValue] = read_config(config_path)
    else:
        config = find_config(opts.path or os.getcwd())

    if config is None:
        return list(Constants.DEFAULT_QUERIES_SHORTCUT)
    queries = pick_env(config, current_env(opts))
    if not queries:
        return list(Constants.DEFAULT_QUERIES_SHORTCUT)
    return list(queries)
