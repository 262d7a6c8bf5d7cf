"""
Serialization helpers for junctions.

Provides JSON/YAML round-trip of a junction's definition via an
intermediate dict representation:

    {"type": "any", "ordered": true, "elements": [2, 3, 5, 7]}

Elements must be values JSON/YAML can carry (numbers, strings, booleans,
None). Storage mode is preserved: an ordered junction is rebuilt with a
fresh OrderedStore, an unordered one aliases the freshly loaded list, which
nothing else owns.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from junctions.junction import Junction, JunctionType
from junctions.storage import OrderedStore
from junctions.variants import JUNCTION_CLASSES

_SCALAR_TYPES = (int, float, str, bool, type(None))


def junction_to_dict(j: Junction) -> Dict[str, Any]:
    elements = list(j.elements)
    for elem in elements:
        if not isinstance(elem, _SCALAR_TYPES):
            raise TypeError(f"Unsupported junction element type: {type(elem).__name__}")
    return {
        "type": j.junction_type.value,
        "ordered": isinstance(j.store, OrderedStore),
        "elements": elements,
    }


def junction_from_dict(d: Dict[str, Any]) -> Junction:
    t = d.get("type")
    try:
        cls = JUNCTION_CLASSES[JunctionType(t)]
    except ValueError:
        raise TypeError(f"Unsupported junction dict type: {t}") from None
    elements = list(d.get("elements", []))
    if d.get("ordered", True):
        return cls.copy(elements)
    return cls.ref(elements)


def junction_to_json(j: Junction) -> str:
    return json.dumps(junction_to_dict(j), sort_keys=True)


def junction_from_json(s: str) -> Junction:
    d = json.loads(s)
    return junction_from_dict(d)


def junction_to_yaml(j: Junction) -> str:
    return yaml.safe_dump(junction_to_dict(j))


def junction_from_yaml(s: str) -> Junction:
    d = yaml.safe_load(s)
    return junction_from_dict(d)
