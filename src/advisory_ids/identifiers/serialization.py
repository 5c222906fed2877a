import tomllib
from typing import Any

import orjson
import tomlkit

from advisory_ids.identifiers.advisory_id import AdvisoryId
from advisory_ids.identifiers.aliases import Aliases


def serialize(advisory_id: AdvisoryId) -> str:
    return advisory_id.raw


def deserialize(value: Any) -> AdvisoryId:
    if not isinstance(value, str):
        raise TypeError(f"advisory ID must be a string, got {type(value).__name__}")
    return AdvisoryId(value)


def _default(obj: Any) -> Any:
    if isinstance(obj, AdvisoryId):
        return serialize(obj)
    if isinstance(obj, Aliases):
        return {k: [serialize(a) for a in v] for k, v in obj.__dict__.items()}
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def dumps_json(obj: Any, indent: bool = False) -> bytes:
    option = orjson.OPT_PASSTHROUGH_DATACLASS
    if indent:
        option |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, default=_default, option=option)


def loads_json(data: str | bytes) -> list[AdvisoryId]:
    values = orjson.loads(data)
    if not isinstance(values, list):
        raise TypeError(f"expected a JSON array of advisory IDs, got {type(values).__name__}")
    return [deserialize(v) for v in values]


def describe(advisory_id: AdvisoryId) -> dict[str, Any]:
    return {
        "id": serialize(advisory_id),
        "kind": advisory_id.kind,
        "year": advisory_id.year,
        "numerical_part": advisory_id.numerical_part,
        "url": advisory_id.url,
        "placeholder": advisory_id.is_placeholder,
    }


def dumps_toml(aliases: Aliases) -> str:
    doc = tomlkit.document()
    doc.append("aliases", tomlkit.table())
    for alias_type, ids in aliases.__dict__.items():
        if ids:
            doc["aliases"][alias_type] = [serialize(a) for a in ids]
            doc["aliases"][alias_type].multiline(True)

    return tomlkit.dumps(doc, sort_keys=False)


def loads_toml(text: str) -> Aliases:
    data = tomllib.loads(text)
    aliases = data.get("aliases", {})
    if not isinstance(aliases, dict):
        raise TypeError(f"expected an [aliases] table, got {type(aliases).__name__}")

    ids = []
    for alias_type, values in aliases.items():
        if not isinstance(values, list):
            raise TypeError(f"expected an array of advisory IDs for {alias_type}, got {type(values).__name__}")
        ids.extend(deserialize(v) for v in values)
    return Aliases.from_ids(ids)
