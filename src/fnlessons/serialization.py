"""
Serialization helpers for fnlessons result objects (PowerResult, GroupedHistogram).

Provides JSON/YAML output via an intermediate dict representation.
PowerResult round-trips losslessly; GroupedHistogram is summarized
(labels, edges, counts) and its Figure is never serialized.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from fnlessons.arithmetic import PowerResult
from fnlessons.backends.histogram import GroupedHistogram, HistogramSeries


def power_result_to_dict(r: PowerResult) -> Dict[str, Any]:
    return {"base": r.base, "exponent": r.exponent, "result": r.result}


def power_result_from_dict(d: Dict[str, Any]) -> PowerResult:
    return PowerResult(base=d["base"], exponent=d["exponent"], result=d["result"])


def power_result_to_json(r: PowerResult) -> str:
    return json.dumps(power_result_to_dict(r), sort_keys=True)


def power_result_from_json(s: str) -> PowerResult:
    return power_result_from_dict(json.loads(s))


def power_result_to_yaml(r: PowerResult) -> str:
    return yaml.safe_dump(power_result_to_dict(r))


def power_result_from_yaml(s: str) -> PowerResult:
    return power_result_from_dict(yaml.safe_load(s))


def series_to_dict(s: HistogramSeries) -> Dict[str, Any]:
    return {"label": s.label, "counts": list(s.counts)}


def histogram_to_dict(h: GroupedHistogram) -> Dict[str, Any]:
    return {
        "value_column": h.value_column,
        "group_column": h.group_column,
        "bin_edges": list(h.bin_edges),
        "series": [series_to_dict(s) for s in h.series],
    }


def histogram_to_json(h: GroupedHistogram) -> str:
    return json.dumps(histogram_to_dict(h), sort_keys=True)


def histogram_to_yaml(h: GroupedHistogram) -> str:
    return yaml.safe_dump(histogram_to_dict(h))
