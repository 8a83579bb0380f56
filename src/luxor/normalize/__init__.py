"""Response normalization layer -- decimal scaling, coercion, timestamps, flattening, mappers."""

from luxor.normalize.coercion import coerce_float, coerce_int, coerce_passthrough
from luxor.normalize.decimal_engine import parse_decimal, scale_down, scale_up, to_float
from luxor.normalize.mappers import (
    map_all_subaccounts_hashrate,
    map_hashrate_score_history,
    map_mining_summary,
    map_pool_hashrate,
    map_profile_hashrate,
    map_subaccounts,
    map_transaction_history,
    map_worker_details,
    map_worker_hashrate_history,
)
from luxor.normalize.shapes import (
    EdgesEnvelope,
    NodesEnvelope,
    extract_field,
    flatten_connection,
    resolve_envelope,
)
from luxor.normalize.timestamps import LEGACY_OFFSET, normalize_timestamp
from luxor.normalize.units import UNIT_EXPONENTS, convert_hashrate, resolve_unit

__all__ = [
    "EdgesEnvelope",
    "LEGACY_OFFSET",
    "NodesEnvelope",
    "UNIT_EXPONENTS",
    "coerce_float",
    "coerce_int",
    "coerce_passthrough",
    "convert_hashrate",
    "extract_field",
    "flatten_connection",
    "map_all_subaccounts_hashrate",
    "map_hashrate_score_history",
    "map_mining_summary",
    "map_pool_hashrate",
    "map_profile_hashrate",
    "map_subaccounts",
    "map_transaction_history",
    "map_worker_details",
    "map_worker_hashrate_history",
    "normalize_timestamp",
    "parse_decimal",
    "resolve_envelope",
    "resolve_unit",
    "scale_down",
    "scale_up",
    "to_float",
]
