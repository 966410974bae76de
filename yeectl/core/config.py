"""Config file loading and target bulb resolution."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, replace
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from yeectl.core.errors import BulbSelectionError, ConfigError
from yeectl.core.model import DEFAULT_PORT, BulbConfig

LOGGER = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_S = 5.0


class UniqueKeyLoader(yaml.SafeLoader):
    """YAML loader that rejects duplicate mapping keys."""


def _construct_mapping(loader: UniqueKeyLoader, node: yaml.Node, deep: bool = False) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if key in mapping:
            raise ConfigError(f"Duplicate key '{key}' in YAML document")
        mapping[key] = loader.construct_object(value_node, deep=deep)
    return mapping


UniqueKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_mapping,
)


@dataclass(frozen=True)
class LoadedConfig:
    bulbs: dict[str, BulbConfig] = field(default_factory=dict)
    default: str | None = None


def default_config_path() -> Path:
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config / "yeectl/config.yaml"


def _load_schema_validator() -> Any:
    schema_text = resources.files("yeectl.schemas").joinpath("config.schema.json").read_text(
        encoding="utf-8"
    )
    schema = json.loads(schema_text)
    validator_cls = validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc

    try:
        loaded = yaml.load(content, Loader=UniqueKeyLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at root")
    return loaded


def _build_config(doc: dict[str, Any], source: Path) -> LoadedConfig:
    try:
        _load_schema_validator().validate(doc)
    except ValidationError as exc:
        path = ".".join(str(p) for p in exc.path)
        where = f" ({path})" if path else ""
        raise ConfigError(f"Schema validation failed for {source}{where}: {exc.message}") from exc

    bulbs = {
        name: BulbConfig(
            name=name,
            host=spec["host"],
            port=int(spec.get("port", DEFAULT_PORT)),
            timeout_s=float(spec.get("timeout_s", _DEFAULT_TIMEOUT_S)),
        )
        for name, spec in doc.get("bulbs", {}).items()
    }
    default = doc.get("default")
    if default is not None and default not in bulbs:
        raise ConfigError(f"Default bulb '{default}' in {source} is not defined under 'bulbs'")
    return LoadedConfig(bulbs=bulbs, default=default)


def load_config(path: Path | None = None) -> LoadedConfig:
    """Load the config file, or return an empty config when it does not exist."""
    source = path or default_config_path()
    if not source.exists():
        LOGGER.debug("No config file at %s", source)
        return LoadedConfig()
    return _build_config(_read_yaml(source), source)


def resolve_bulb(
    config: LoadedConfig,
    name: str | None = None,
    *,
    host: str | None = None,
    port: int | None = None,
    timeout_s: float | None = None,
) -> BulbConfig:
    """Pick the target bulb.

    An explicit ``host`` wins over the config file. Otherwise ``name``, then the
    configured default, then the only configured bulb is used. ``port`` and
    ``timeout_s`` override whatever was resolved.
    """
    if host:
        bulb = BulbConfig(name=name or host, host=host)
    elif name:
        bulb = config.bulbs.get(name)
        if bulb is None:
            available = ", ".join(sorted(config.bulbs)) or "<none>"
            raise BulbSelectionError(f"Unknown bulb '{name}'. Configured: {available}")
    elif config.default:
        bulb = config.bulbs[config.default]
    elif len(config.bulbs) == 1:
        bulb = next(iter(config.bulbs.values()))
    elif not config.bulbs:
        raise BulbSelectionError(
            f"No bulb configured. Pass --host or add one to {default_config_path()}."
        )
    else:
        candidates = ", ".join(sorted(config.bulbs))
        raise BulbSelectionError(
            f"Multiple bulbs configured: {candidates}. Use --bulb to choose one or set 'default'."
        )

    if port is not None:
        bulb = replace(bulb, port=port)
    if timeout_s is not None:
        bulb = replace(bulb, timeout_s=timeout_s)
    return bulb
