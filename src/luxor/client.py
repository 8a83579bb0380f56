"""Public Luxor pool API client.

Each entry point builds its query variables, awaits the transport exactly
once, and hands the raw tree to the matching mapper. The client keeps no
state between calls beyond its configuration, so calls can run concurrently.

Usage:
    client = LuxorClient.from_settings(AppSettings().luxor)
    workers = await client.get_worker_details("my-subaccount", units="TH")
"""

from typing import Any

from luxor import queries
from luxor.config import LuxorSettings
from luxor.exceptions import MissingCredential
from luxor.logging import get_logger
from luxor.models import (
    DEFAULT_DETAILS_DURATION,
    DetailsDuration,
    HashRateUnit,
    HashrateInterval,
    HashrateScorePoint,
    MiningProfileName,
    MiningSummary,
    Pagination,
    ScalarHashrate,
    SubaccountHashrateSeries,
    SubaccountName,
    Transaction,
    WorkerDetail,
    WorkerHashratePoint,
)
from luxor.normalize import mappers
from luxor.normalize.units import resolve_unit
from luxor.transport.client import Transport
from luxor.transport.graphql import GraphQLTransport

logger = get_logger(__name__)

API_KEY_HEADER = "X-LUX-API-KEY"

#: Page size when the caller gives no pagination to get_subaccounts.
SUBACCOUNTS_PAGE_SIZE = 1000

#: Page size when the caller gives neither first nor last to get_worker_details.
WORKER_DETAILS_PAGE_SIZE = 10000

POOL_ORG_SLUG = "luxor"


def _enum_value(value: Any) -> Any:
    """Unwrap str enums for JSON variables; leave anything else alone."""
    return getattr(value, "value", value)


class LuxorClient:
    """Async client for the Luxor pool GraphQL API.

    Args:
        api_key: Static API key sent with every request.
        transport: Query transport (see ``luxor.transport``).
        coin: Default mining profile when a call gives none.
        units: Default hash rate unit when a call gives none.
    """

    def __init__(
        self,
        api_key: str | None,
        transport: Transport,
        coin: MiningProfileName | str | None = None,
        units: HashRateUnit | str | None = None,
    ) -> None:
        self._api_key = api_key
        self._transport = transport
        self._coin = coin
        self._units = units

    @classmethod
    def from_settings(cls, settings: LuxorSettings) -> "LuxorClient":
        """Build a client with a GraphQLTransport from LuxorSettings."""
        return cls(
            api_key=settings.api_key.get_secret_value(),
            transport=GraphQLTransport.from_settings(settings),
            coin=settings.coin,
            units=settings.units,
        )

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> "LuxorClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ──────────────────────────────────────────────
    # Public entry points
    # ──────────────────────────────────────────────

    async def get_subaccounts(
        self, pagination: Pagination | None = None
    ) -> list[SubaccountName]:
        """List subaccount usernames. Defaults to the first 1,000."""
        if pagination is None:
            pagination = Pagination(first=SUBACCOUNTS_PAGE_SIZE)
        response = await self._call_api(
            queries.SUBACCOUNTS, pagination.as_variables(), "getSubaccountAccessList"
        )
        return mappers.map_subaccounts(response)

    async def get_worker_details(
        self,
        subaccount: str,
        duration: DetailsDuration | None = None,
        coin: MiningProfileName | str | None = None,
        units: HashRateUnit | str | None = None,
        pagination: Pagination | None = None,
    ) -> list[WorkerDetail]:
        """List workers on a subaccount.

        Duration defaults to 7 days. When neither ``first`` nor ``last`` is
        given, the first 10,000 workers are requested.
        """
        unit = self._resolve_units(units)
        pagination = pagination or Pagination()
        first = pagination.first
        if first is None and pagination.last is None:
            first = WORKER_DETAILS_PAGE_SIZE

        variables = {
            "mpn": self._resolve_coin(coin),
            "duration": (duration or DEFAULT_DETAILS_DURATION).as_variables(),
            "uname": subaccount,
            "first": first,
            "last": pagination.last,
            "offset": pagination.offset,
        }
        response = await self._call_api(
            queries.WORKER_DETAILS, variables, "getWorkerDetails"
        )
        return mappers.map_worker_details(response, unit)

    async def get_worker_hashrate(
        self,
        subaccount: str,
        worker: str,
        duration: HashrateInterval | str,
        bucket: HashrateInterval | str,
        coin: MiningProfileName | str | None = None,
        units: HashRateUnit | str | None = None,
        pagination: Pagination | None = None,
    ) -> list[WorkerHashratePoint]:
        """Hashrate history of one worker, bucketed by ``bucket``."""
        unit = self._resolve_units(units)
        variables = {
            "username": subaccount,
            "workerName": worker,
            "mpn": self._resolve_coin(coin),
            "inputDuration": _enum_value(duration),
            "inputBucket": _enum_value(bucket),
            **(pagination or Pagination()).as_variables(),
        }
        response = await self._call_api(
            queries.WORKER_HASHRATE_HISTORY, variables, "getWorkerHashrateHistory"
        )
        return mappers.map_worker_hashrate_history(response, unit)

    async def get_subaccount_summary(
        self,
        subaccount: str,
        duration: HashrateInterval | str,
        units: HashRateUnit | str | None = None,
        coin: MiningProfileName | str | None = None,
    ) -> MiningSummary:
        """Mining summary of a subaccount over ``duration``."""
        unit = self._resolve_units(units)
        variables = {
            "mpn": self._resolve_coin(coin),
            "inputDuration": _enum_value(duration),
            "userName": subaccount,
        }
        response = await self._call_api(
            queries.MINING_SUMMARY, variables, "getMiningSummary"
        )
        return mappers.map_mining_summary(response, unit)

    async def get_all_subaccounts_hashrate(
        self,
        interval: HashrateInterval | str,
        units: HashRateUnit | str | None = None,
        coin: MiningProfileName | str | None = None,
        pagination: Pagination | None = None,
    ) -> list[SubaccountHashrateSeries]:
        """Hashrate history of every subaccount."""
        unit = self._resolve_units(units)
        variables = {
            "mpn": self._resolve_coin(coin),
            "inputInterval": _enum_value(interval),
            **(pagination or Pagination()).as_variables(),
        }
        response = await self._call_api(
            queries.ALL_SUBACCOUNTS_HASHRATE_HISTORY,
            variables,
            "getAllSubaccountsHashrateHistory",
        )
        return mappers.map_all_subaccounts_hashrate(response, unit)

    async def get_profile_hashrate(
        self,
        units: HashRateUnit | str | None = None,
        coin: MiningProfileName | str | None = None,
    ) -> ScalarHashrate:
        """Total hashrate of the account profile."""
        unit = self._resolve_units(units)
        response = await self._call_api(
            queries.PROFILE_HASHRATE,
            {"mpn": self._resolve_coin(coin)},
            "getProfileHashrate",
        )
        return mappers.map_profile_hashrate(response, unit)

    async def get_profile_hashrate_score(
        self,
        subaccount: str,
        units: HashRateUnit | str | None = None,
        coin: MiningProfileName | str | None = None,
        pagination: Pagination | None = None,
    ) -> list[HashrateScorePoint]:
        """Hashrate score history of a subaccount, newest first."""
        unit = self._resolve_units(units)
        variables = {
            "mpn": self._resolve_coin(coin),
            "uname": subaccount,
            **(pagination or Pagination()).as_variables(),
        }
        response = await self._call_api(
            queries.HASHRATE_SCORE_HISTORY, variables, "getHashrateScoreHistory"
        )
        return mappers.map_hashrate_score_history(response, unit)

    async def get_transaction_history(
        self,
        subaccount: str,
        coin: MiningProfileName | str | None = None,
        pagination: Pagination | None = None,
    ) -> list[Transaction]:
        """Payout transactions of a subaccount, newest first."""
        variables = {
            "uname": subaccount,
            "cid": self._resolve_coin(coin),
            **(pagination or Pagination()).as_variables(),
        }
        response = await self._call_api(
            queries.TRANSACTION_HISTORY, variables, "getTransactionHistory"
        )
        return mappers.map_transaction_history(response)

    async def get_pool_hashrate(
        self,
        units: HashRateUnit | str | None = None,
        coin: MiningProfileName | str | None = None,
    ) -> ScalarHashrate:
        """Total pool hashrate at Luxor."""
        unit = self._resolve_units(units)
        variables = {"mpn": self._resolve_coin(coin), "orgSlug": POOL_ORG_SLUG}
        response = await self._call_api(
            queries.POOL_HASHRATE, variables, "getPoolHashrate"
        )
        return mappers.map_pool_hashrate(response, unit)

    # ──────────────────────────────────────────────
    # Internals
    # ──────────────────────────────────────────────

    def _resolve_coin(self, coin: MiningProfileName | str | None) -> str | None:
        return _enum_value(coin or self._coin)

    def _resolve_units(self, units: HashRateUnit | str | None) -> HashRateUnit:
        """Validate the unit before any request is made."""
        return resolve_unit(units or self._units)

    async def _call_api(
        self, query: str, variables: dict[str, Any], operation: str
    ) -> dict[str, Any]:
        """Attach the API key header and run the query once."""
        if not isinstance(self._api_key, str) or not self._api_key:
            raise MissingCredential("No Luxor Pool API key provided!")

        logger.debug("luxor_query_sent", operation=operation)
        return await self._transport.execute(
            query, variables, {API_KEY_HEADER: self._api_key}
        )
