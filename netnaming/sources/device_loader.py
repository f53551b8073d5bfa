"""Loading and validation of YAML device descriptions."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from netnaming.core.errors import DeviceLoadError, DeviceValidationError
from netnaming.sources.memory import MemoryDevice


class UniqueKeyLoader(yaml.SafeLoader):
    """YAML loader that rejects duplicate mapping keys."""


# Keep yes/no/on/off as strings: boolean parsing is done by the property store.
UniqueKeyLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in mappings if tag != "tag:yaml.org,2002:bool"]
    for first_char, mappings in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _construct_mapping(loader: UniqueKeyLoader, node: yaml.Node, deep: bool = False) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if key in mapping:
            raise DeviceValidationError(f"Duplicate key '{key}' in YAML document")
        mapping[key] = loader.construct_object(value_node, deep=deep)
    return mapping


UniqueKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_mapping,
)


def _load_schema_validator() -> Any:
    schema_text = resources.files("netnaming.schemas").joinpath("device.schema.json").read_text(
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
        raise DeviceLoadError(f"Could not read device file {path}: {exc}") from exc

    try:
        loaded = yaml.load(content, Loader=UniqueKeyLoader)
    except yaml.YAMLError as exc:
        raise DeviceValidationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise DeviceValidationError(f"Device file {path} must contain a mapping at root")
    return loaded


def _normalize_value(value: str | int | bool) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _normalize_values(values: dict[str, Any] | None) -> dict[str, str]:
    return {key: _normalize_value(value) for key, value in (values or {}).items()}


def build_device(doc: dict[str, Any], source: Path | str = "<memory>") -> MemoryDevice:
    validator = _load_schema_validator()
    try:
        validator.validate(doc)
    except ValidationError as exc:
        path = ".".join(str(p) for p in exc.path)
        where = f" ({path})" if path else ""
        raise DeviceValidationError(f"Schema validation failed for {source}{where}: {exc.message}") from exc

    return MemoryDevice(
        syspath=doc["syspath"],
        properties=_normalize_values(doc.get("properties")),
        sysattrs=_normalize_values(doc.get("sysattrs")),
    )


def load_device(path: Path) -> MemoryDevice:
    return build_device(_read_yaml(path), path)
