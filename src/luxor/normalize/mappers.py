"""Response mappers: raw GraphQL ``data`` trees to canonical records.

Each mapper pulls its root field out of the response, flattens collections via
``flatten_connection``, and coerces every field with a fixed policy:

- share counters, data points, uptime counts: ``coerce_int`` (absent -> 0)
- efficiency, prices, percentages: ``coerce_float`` (absent -> 0.0)
- hash rates: ``convert_hashrate`` in the requested unit (absent -> 0)
- ids, names, statuses, decimal-string money: passthrough
- worker ``updatedAt`` / transaction ``createdAt``: legacy 5-hour offset
- all other timestamps: parsed as-is

Units are resolved before any record is read, so an unknown unit fails even
when the collection is empty. A mapper returns everything or raises.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from luxor.exceptions import MalformedResponseShape
from luxor.models import (
    HashRateUnit,
    HashrateScorePoint,
    MiningSummary,
    ScalarHashrate,
    SubaccountHashrateSeries,
    SubaccountName,
    Transaction,
    WorkerDetail,
    WorkerHashratePoint,
)
from luxor.normalize.coercion import coerce_float, coerce_int, coerce_passthrough
from luxor.normalize.shapes import extract_field, flatten_connection
from luxor.normalize.timestamps import normalize_timestamp
from luxor.normalize.units import convert_hashrate, resolve_unit

UnitLike = HashRateUnit | str | None


def map_subaccounts(response: Mapping[str, Any]) -> list[SubaccountName]:
    """``users.nodes[].username`` in server order."""
    nodes = flatten_connection(extract_field(response, "users"))
    return [coerce_passthrough(node.get("username")) for node in nodes]


def map_worker_details(
    response: Mapping[str, Any], units: UnitLike
) -> list[WorkerDetail]:
    """Map ``getWorkerDetails`` edges to WorkerDetail records."""
    unit = resolve_unit(units)
    workers = flatten_connection(extract_field(response, "getWorkerDetails"))

    result = [
        WorkerDetail(
            id=coerce_passthrough(worker.get("minerId")),
            name=coerce_passthrough(worker.get("workerName")),
            coin=coerce_passthrough(worker.get("miningProfileName")),
            updated_at=normalize_timestamp(
                worker.get("updatedAt"), apply_legacy_offset=True
            ),
            status=coerce_passthrough(worker.get("status")),
            hashrate=convert_hashrate(worker.get("hashrate"), unit),
            valid_shares=coerce_int(worker.get("validShares")),
            stale_shares=coerce_int(worker.get("staleShares")),
            invalid_shares=coerce_int(worker.get("invalidShares")),
            low_diff_shares=coerce_int(worker.get("lowDiffShares")),
            bad_shares=coerce_int(worker.get("badShares")),
            duplicate_shares=coerce_int(worker.get("duplicateShares")),
            revenue=coerce_passthrough(worker.get("revenue")),
            efficiency=coerce_float(worker.get("efficiency")),
        )
        for worker in workers
    ]
    return result


def _hashrate_point(
    record: Mapping[str, Any], unit: HashRateUnit, data_points_key: str = "dataPoints"
) -> WorkerHashratePoint:
    return WorkerHashratePoint(
        time=normalize_timestamp(record.get("time"), apply_legacy_offset=False),
        hashrate=convert_hashrate(record.get("hashrate"), unit),
        data_points=coerce_int(record.get(data_points_key)),
    )


def map_worker_hashrate_history(
    response: Mapping[str, Any], units: UnitLike
) -> list[WorkerHashratePoint]:
    """Map ``getWorkerHashrateHistory`` edges to hashrate points."""
    unit = resolve_unit(units)
    nodes = flatten_connection(extract_field(response, "getWorkerHashrateHistory"))
    return [_hashrate_point(node, unit) for node in nodes]


def map_mining_summary(response: Mapping[str, Any], units: UnitLike) -> MiningSummary:
    """Map the single ``getMiningSummary`` object."""
    unit = resolve_unit(units)
    summary = extract_field(response, "getMiningSummary")
    if not isinstance(summary, Mapping):
        raise MalformedResponseShape("getMiningSummary is not an object")

    return MiningSummary(
        username=coerce_passthrough(summary.get("username")),
        valid_shares=coerce_int(summary.get("validShares")),
        invalid_shares=coerce_int(summary.get("invalidShares")),
        stale_shares=coerce_int(summary.get("staleShares")),
        low_diff_shares=coerce_int(summary.get("lowDiffShares")),
        bad_shares=coerce_int(summary.get("badShares")),
        duplicate_shares=coerce_int(summary.get("duplicateShares")),
        revenue=coerce_passthrough(summary.get("revenue")),
        hashrate=convert_hashrate(summary.get("hashrate"), unit),
    )


def map_all_subaccounts_hashrate(
    response: Mapping[str, Any], units: UnitLike
) -> list[SubaccountHashrateSeries]:
    """Map ``getAllSubaccountsHashrateHistory`` edges.

    Each node carries ``hashrateHistory``, a JSON list whose entries use the
    snake_case ``data_points`` key. ``dataPoints`` is accepted as well.
    """
    unit = resolve_unit(units)
    nodes = flatten_connection(
        extract_field(response, "getAllSubaccountsHashrateHistory")
    )

    result = []
    for node in nodes:
        history = node.get("hashrateHistory")
        if not isinstance(history, Sequence) or isinstance(history, (str, bytes)):
            raise MalformedResponseShape(
                f"hashrateHistory for {node.get('username')!r} is not a list"
            )

        points = []
        for entry in history:
            if not isinstance(entry, Mapping):
                raise MalformedResponseShape("hashrateHistory entry is not an object")
            key = "dataPoints" if "dataPoints" in entry else "data_points"
            points.append(_hashrate_point(entry, unit, data_points_key=key))

        result.append(
            SubaccountHashrateSeries(
                username=coerce_passthrough(node.get("username")),
                history=tuple(points),
            )
        )
    return result


def map_profile_hashrate(response: Mapping[str, Any], units: UnitLike) -> ScalarHashrate:
    """``getProfileHashrate`` is a bare scalar."""
    return convert_hashrate(extract_field(response, "getProfileHashrate"), units)


def map_pool_hashrate(response: Mapping[str, Any], units: UnitLike) -> ScalarHashrate:
    """``getPoolHashrate`` is a bare scalar."""
    return convert_hashrate(extract_field(response, "getPoolHashrate"), units)


def map_hashrate_score_history(
    response: Mapping[str, Any], units: UnitLike
) -> list[HashrateScorePoint]:
    """Map ``getHashrateScoreHistory`` nodes (server order, newest first)."""
    unit = resolve_unit(units)
    nodes = flatten_connection(extract_field(response, "getHashrateScoreHistory"))
    return [
        HashrateScorePoint(
            date=normalize_timestamp(node.get("date"), apply_legacy_offset=False),
            efficiency=coerce_float(node.get("efficiency")),
            hashrate=convert_hashrate(node.get("hashrate"), unit),
            revenue=coerce_float(node.get("revenue")),
            uptime_percentage=coerce_float(node.get("uptimePercentage")),
            uptime_total_minutes=coerce_int(node.get("uptimeTotalMinutes")),
            uptime_total_machines=coerce_int(node.get("uptimeTotalMachines")),
        )
        for node in nodes
    ]


def map_transaction_history(response: Mapping[str, Any]) -> list[Transaction]:
    """Map ``getTransactionHistory`` edges (server order, newest first)."""
    nodes = flatten_connection(extract_field(response, "getTransactionHistory"))
    result = [
        Transaction(
            id=coerce_passthrough(node.get("transactionId")),
            status=coerce_passthrough(node.get("status")),
            amount=coerce_passthrough(node.get("amount")),
            created_at=normalize_timestamp(
                node.get("createdAt"), apply_legacy_offset=True
            ),
            coin_price=coerce_float(node.get("coinPrice")),
        )
        for node in nodes
    ]
    return result
