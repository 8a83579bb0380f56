"""Tests for the response mappers.

Sample payloads mimic the Luxor GraphQL ``data`` member for each query.
"""

from datetime import datetime, timezone

import pytest

from luxor.exceptions import (
    InvalidNumericLiteral,
    InvalidTimestamp,
    MalformedResponseShape,
    UnknownUnit,
)
from luxor.models import (
    HashRateUnit,
    HashrateScorePoint,
    MiningSummary,
    SubaccountHashrateSeries,
    Transaction,
    WorkerDetail,
    WorkerHashratePoint,
)
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

UTC = timezone.utc


# ---------------------------------------------------------------------------
# Sample responses
# ---------------------------------------------------------------------------

WORKER_NODE = {
    "minerId": 1234,
    "workerName": "rig-01",
    "miningProfileName": "BTC",
    "updatedAt": "2024-06-01T00:00:00Z",
    "status": "Active",
    "hashrate": "5000000000000",
    "validShares": None,
    "staleShares": "3",
    "invalidShares": "0",
    "lowDiffShares": "1",
    "badShares": None,
    "duplicateShares": "2",
    "revenue": "0.00012345678901234567",
    "efficiency": "99.5",
}

WORKER_DETAILS_RESPONSE = {"getWorkerDetails": {"edges": [{"node": WORKER_NODE}]}}

TRANSACTIONS_RESPONSE = {
    "getTransactionHistory": {
        "edges": [
            {
                "node": {
                    "amount": "0.01234567",
                    "coinPrice": "43250.55",
                    "createdAt": "2024-01-02T03:00:00Z",
                    "rowId": 9,
                    "status": "CONFIRMED",
                    "transactionId": "tx-newest",
                }
            },
            {
                "node": {
                    "amount": "0.02",
                    "coinPrice": None,
                    "createdAt": "2024-01-01T12:00:00Z",
                    "rowId": 8,
                    "status": "PENDING",
                    "transactionId": "tx-older",
                }
            },
        ]
    }
}


class TestMapSubaccounts:
    def test_usernames_in_server_order(self) -> None:
        response = {"users": {"nodes": [{"username": "zeta"}, {"username": "alpha"}]}}
        assert map_subaccounts(response) == ["zeta", "alpha"]

    def test_empty(self) -> None:
        assert map_subaccounts({"users": {"nodes": []}}) == []

    def test_missing_root_raises(self) -> None:
        with pytest.raises(MalformedResponseShape):
            map_subaccounts({})


class TestMapWorkerDetails:
    """Tests for map_worker_details."""

    def test_end_to_end_fields(self) -> None:
        (worker,) = map_worker_details(WORKER_DETAILS_RESPONSE, "TH")

        assert isinstance(worker, WorkerDetail)
        assert worker.id == 1234
        assert worker.name == "rig-01"
        assert worker.coin == "BTC"
        assert worker.status == "Active"
        assert worker.hashrate == 5.0
        assert worker.valid_shares == 0
        assert worker.stale_shares == 3
        assert worker.bad_shares == 0
        assert worker.duplicate_shares == 2
        assert worker.low_diff_shares == 1
        assert worker.efficiency == 99.5
        assert worker.revenue == "0.00012345678901234567"

    def test_updated_at_has_legacy_offset(self) -> None:
        (worker,) = map_worker_details(WORKER_DETAILS_RESPONSE, "TH")
        assert worker.updated_at == datetime(2024, 5, 31, 19, tzinfo=UTC)

    def test_absent_hashrate_and_efficiency_default(self) -> None:
        node = {**WORKER_NODE, "hashrate": None, "efficiency": None}
        (worker,) = map_worker_details({"getWorkerDetails": {"edges": [{"node": node}]}}, "GH")
        assert worker.hashrate == 0.0
        assert worker.efficiency == 0.0

    def test_records_are_frozen(self) -> None:
        (worker,) = map_worker_details(WORKER_DETAILS_RESPONSE, "TH")
        with pytest.raises(AttributeError):
            worker.hashrate = 1.0  # type: ignore[misc]

    def test_unknown_unit_raises_even_when_empty(self) -> None:
        with pytest.raises(UnknownUnit):
            map_worker_details({"getWorkerDetails": {"edges": []}}, "QH")

    def test_malformed_share_counter_raises(self) -> None:
        node = {**WORKER_NODE, "validShares": "lots"}
        with pytest.raises(InvalidNumericLiteral):
            map_worker_details({"getWorkerDetails": {"edges": [{"node": node}]}}, "TH")

    def test_missing_updated_at_raises(self) -> None:
        node = {**WORKER_NODE, "updatedAt": None}
        with pytest.raises(InvalidTimestamp):
            map_worker_details({"getWorkerDetails": {"edges": [{"node": node}]}}, "TH")

    def test_nodes_only_shape_rejected_without_list(self) -> None:
        with pytest.raises(MalformedResponseShape):
            map_worker_details({"getWorkerDetails": {"items": []}}, "TH")


class TestMapWorkerHashrateHistory:
    def test_points(self) -> None:
        response = {
            "getWorkerHashrateHistory": {
                "edges": [
                    {"node": {"time": "2024-01-01T12:00:00Z", "hashrate": "2500000000000000", "dataPoints": "4"}},
                    {"node": {"time": "2024-01-01T11:00:00Z", "hashrate": None, "dataPoints": None}},
                ]
            }
        }
        result = map_worker_hashrate_history(response, HashRateUnit.PH)

        assert result == [
            WorkerHashratePoint(time=datetime(2024, 1, 1, 12, tzinfo=UTC), hashrate=2.5, data_points=4),
            WorkerHashratePoint(time=datetime(2024, 1, 1, 11, tzinfo=UTC), hashrate=0.0, data_points=0),
        ]


class TestMapMiningSummary:
    def test_summary(self) -> None:
        response = {
            "getMiningSummary": {
                "username": "alice",
                "validShares": "1000",
                "invalidShares": None,
                "staleShares": "5",
                "lowDiffShares": "",
                "badShares": "0",
                "duplicateShares": "1",
                "revenue": "0.00512345678901234567",
                "hashrate": "120000000000000000",
            }
        }
        summary = map_mining_summary(response, "PH")

        assert summary == MiningSummary(
            username="alice",
            valid_shares=1000,
            invalid_shares=0,
            stale_shares=5,
            low_diff_shares=0,
            bad_shares=0,
            duplicate_shares=1,
            revenue="0.00512345678901234567",
            hashrate=120.0,
        )

    def test_null_summary_raises(self) -> None:
        with pytest.raises(MalformedResponseShape):
            map_mining_summary({"getMiningSummary": None}, "TH")


class TestMapAllSubaccountsHashrate:
    """Tests for map_all_subaccounts_hashrate."""

    def test_nested_history(self) -> None:
        response = {
            "getAllSubaccountsHashrateHistory": {
                "edges": [
                    {
                        "node": {
                            "username": "alice",
                            "hashrateHistory": [
                                {"time": "2024-01-01T00:00:00Z", "hashrate": "3000000000000", "data_points": 12},
                                {"time": "2024-01-01T01:00:00Z", "hashrate": None, "data_points": None},
                            ],
                        }
                    },
                    {"node": {"username": "bob", "hashrateHistory": []}},
                ]
            }
        }
        result = map_all_subaccounts_hashrate(response, "TH")

        assert result == [
            SubaccountHashrateSeries(
                username="alice",
                history=(
                    WorkerHashratePoint(time=datetime(2024, 1, 1, 0, tzinfo=UTC), hashrate=3.0, data_points=12),
                    WorkerHashratePoint(time=datetime(2024, 1, 1, 1, tzinfo=UTC), hashrate=0.0, data_points=0),
                ),
            ),
            SubaccountHashrateSeries(username="bob", history=()),
        ]

    def test_camel_case_data_points_accepted(self) -> None:
        response = {
            "getAllSubaccountsHashrateHistory": {
                "edges": [
                    {
                        "node": {
                            "username": "alice",
                            "hashrateHistory": [
                                {"time": "2024-01-01T00:00:00Z", "hashrate": "1000", "dataPoints": "7"}
                            ],
                        }
                    }
                ]
            }
        }
        (series,) = map_all_subaccounts_hashrate(response, "KH")
        assert series.history[0].data_points == 7
        assert series.history[0].hashrate == 1.0

    def test_history_timestamps_have_no_offset(self) -> None:
        response = {
            "getAllSubaccountsHashrateHistory": {
                "edges": [
                    {
                        "node": {
                            "username": "alice",
                            "hashrateHistory": [{"time": "2024-01-01T12:00:00Z", "hashrate": "0", "data_points": 1}],
                        }
                    }
                ]
            }
        }
        (series,) = map_all_subaccounts_hashrate(response, "H")
        assert series.history[0].time == datetime(2024, 1, 1, 12, tzinfo=UTC)

    @pytest.mark.parametrize("history", [None, "[]", {"time": "x"}])
    def test_non_list_history_raises(self, history: object) -> None:
        response = {
            "getAllSubaccountsHashrateHistory": {
                "edges": [{"node": {"username": "alice", "hashrateHistory": history}}]
            }
        }
        with pytest.raises(MalformedResponseShape):
            map_all_subaccounts_hashrate(response, "TH")


class TestScalarHashrate:
    def test_profile_hashrate(self) -> None:
        assert map_profile_hashrate({"getProfileHashrate": "7500000000000000"}, "PH") == 7.5

    def test_profile_hashrate_null_is_zero(self) -> None:
        assert map_profile_hashrate({"getProfileHashrate": None}, "TH") == 0.0

    def test_pool_hashrate(self) -> None:
        assert map_pool_hashrate({"getPoolHashrate": "12345000000000000000"}, "EH") == 12.345

    def test_unknown_unit(self) -> None:
        with pytest.raises(UnknownUnit):
            map_profile_hashrate({"getProfileHashrate": "1"}, "QH")


class TestMapHashrateScoreHistory:
    def test_score_points(self) -> None:
        response = {
            "getHashrateScoreHistory": {
                "nodes": [
                    {
                        "date": "2024-01-02T00:00:00+00:00",
                        "efficiency": "98.7",
                        "hashrate": "110000000000000000",
                        "revenue": "0.0051",
                        "uptimePercentage": "99.9",
                        "uptimeTotalMinutes": "1438",
                        "uptimeTotalMachines": "12",
                    },
                    {
                        "date": "2024-01-01T00:00:00+00:00",
                        "efficiency": None,
                        "hashrate": None,
                        "revenue": None,
                        "uptimePercentage": None,
                        "uptimeTotalMinutes": None,
                        "uptimeTotalMachines": None,
                    },
                ]
            }
        }
        result = map_hashrate_score_history(response, "PH")

        assert result == [
            HashrateScorePoint(
                date=datetime(2024, 1, 2, tzinfo=UTC),
                efficiency=98.7,
                hashrate=110.0,
                revenue=0.0051,
                uptime_percentage=99.9,
                uptime_total_minutes=1438,
                uptime_total_machines=12,
            ),
            HashrateScorePoint(
                date=datetime(2024, 1, 1, tzinfo=UTC),
                efficiency=0.0,
                hashrate=0.0,
                revenue=0.0,
                uptime_percentage=0.0,
                uptime_total_minutes=0,
                uptime_total_machines=0,
            ),
        ]

    def test_edges_shape_also_accepted(self) -> None:
        node = {"date": "2024-01-01", "hashrate": "1000"}
        response = {"getHashrateScoreHistory": {"edges": [{"node": node}]}}
        (point,) = map_hashrate_score_history(response, "KH")
        assert point.hashrate == 1.0


class TestMapTransactionHistory:
    """Tests for map_transaction_history."""

    def test_coin_price_is_exact_float(self) -> None:
        result = map_transaction_history(TRANSACTIONS_RESPONSE)
        assert isinstance(result[0].coin_price, float)
        assert result[0].coin_price == 43250.55

    def test_fields_and_order(self) -> None:
        result = map_transaction_history(TRANSACTIONS_RESPONSE)

        assert result == [
            Transaction(
                id="tx-newest",
                status="CONFIRMED",
                amount="0.01234567",
                created_at=datetime(2024, 1, 1, 22, tzinfo=UTC),
                coin_price=43250.55,
            ),
            Transaction(
                id="tx-older",
                status="PENDING",
                amount="0.02",
                created_at=datetime(2024, 1, 1, 7, tzinfo=UTC),
                coin_price=0.0,
            ),
        ]

    def test_malformed_coin_price_raises(self) -> None:
        response = {
            "getTransactionHistory": {
                "edges": [{"node": {"coinPrice": "n/a", "createdAt": "2024-01-01T00:00:00Z"}}]
            }
        }
        with pytest.raises(InvalidNumericLiteral):
            map_transaction_history(response)


@pytest.mark.usefixtures("unconfigured_logging")
class TestMappersAreSilent:
    def test_no_output_without_logging_configured(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        map_transaction_history({"getTransactionHistory": {"edges": []}})
        map_worker_details({"getWorkerDetails": {"edges": []}}, HashRateUnit.TH)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
