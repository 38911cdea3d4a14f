"""Config types for building a Commander from JSON/YAML data.

Config-driven construction path:
  dict → parse_commander_config() → CommanderConfig → Commander.from_config()

Expected shape::

    pattern: "{at:10001}roll [count:number=1]"
    field_map:            # optional, merged over the default mapping
      image: [src, url]
      at: user_id
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import yaml

from segmatch._errors import ConfigParseError

if TYPE_CHECKING:
    from segmatch._field_mapping import FieldMapping


@dataclass(frozen=True, slots=True)
class CommanderConfig:
    """Pattern string plus field-mapping overrides."""

    pattern: str
    field_map: Mapping[str, FieldMapping] = field(
        default_factory=lambda: MappingProxyType({})
    )


def parse_commander_config(data: dict[str, Any]) -> CommanderConfig:
    """Parse a dict into a CommanderConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    pattern = data.get("pattern")
    if pattern is None:
        msg = "missing required field 'pattern'"
        raise ConfigParseError(msg)
    if not isinstance(pattern, str):
        msg = f"'pattern' must be a string, got {type(pattern).__name__}"
        raise ConfigParseError(msg)

    field_map = parse_field_map(data.get("field_map", {}))
    return CommanderConfig(pattern=pattern, field_map=MappingProxyType(field_map))


def parse_field_map(data: Any) -> dict[str, FieldMapping]:
    """Parse a field-map dict: segment type → field name or list of field names.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"'field_map' must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    parsed: dict[str, FieldMapping] = {}
    for seg_type, mapping in data.items():
        if not isinstance(seg_type, str) or not seg_type:
            msg = f"field_map keys must be non-empty strings, got {seg_type!r}"
            raise ConfigParseError(msg)
        if isinstance(mapping, str) and mapping:
            parsed[seg_type] = mapping
        elif isinstance(mapping, list) and mapping and all(
            isinstance(name, str) and name for name in mapping
        ):
            parsed[seg_type] = tuple(mapping)
        else:
            msg = (
                f"field_map[{seg_type!r}] must be a field name or a non-empty "
                f"list of field names, got {mapping!r}"
            )
            raise ConfigParseError(msg)
    return parsed


def load_commander_config(path: str | Path) -> CommanderConfig:
    """Read a YAML (or JSON) file and parse it into a CommanderConfig.

    Raises:
        ConfigParseError: If the file is not valid YAML or is malformed.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"invalid YAML in {path}: {e}"
        raise ConfigParseError(msg) from e
    return parse_commander_config(data)
