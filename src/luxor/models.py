"""Shared data models for the Luxor pool client.

Records are immutable value objects built once per response element by the
mappers in ``luxor.normalize.mappers``. Hash rates are converted in Decimal
and exported as float only at the end; money amounts the pool returns as
decimal strings (``revenue``, ``amount``) are kept as strings.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class HashRateUnit(str, Enum):
    """Hash rate unit symbol. Each step is a factor of 1000."""

    H = "H"
    KH = "KH"
    MH = "MH"
    GH = "GH"
    TH = "TH"
    PH = "PH"
    EH = "EH"
    ZH = "ZH"


class MiningProfileName(str, Enum):
    """Coin / algorithm profile a query is scoped to."""

    ARRR = "ARRR"
    BTC = "BTC"
    DASH = "DASH"
    DCR = "DCR"
    KMD = "KMD"
    LBC = "LBC"
    SC = "SC"
    SCP = "SCP"
    ZEC = "ZEC"
    ZEN = "ZEN"
    EQUI = "EQUI"
    TBTC = "TBTC"
    ETH = "ETH"
    TETH = "TETH"


class HashrateInterval(str, Enum):
    """Bucket / window sizes accepted by the hashrate history queries."""

    FIFTEEN_MINUTES = "_15_MINUTE"
    ONE_HOUR = "_1_HOUR"
    SIX_HOURS = "_6_HOUR"
    ONE_DAY = "_1_DAY"


# ──────────────────────────────────────────────
# Query parameters
# ──────────────────────────────────────────────


@dataclass(frozen=True)
class Pagination:
    """Pagination window passed through verbatim to the API."""

    first: int | None = None
    last: int | None = None
    offset: int | None = None

    def as_variables(self) -> dict[str, int | None]:
        return {"first": self.first, "last": self.last, "offset": self.offset}


@dataclass(frozen=True)
class DetailsDuration:
    """Look-back interval for worker details. Unset parts are omitted."""

    seconds: int | None = None
    minutes: int | None = None
    hours: int | None = None
    days: int | None = None
    months: int | None = None
    years: int | None = None

    def as_variables(self) -> dict[str, int]:
        parts = {
            "seconds": self.seconds,
            "minutes": self.minutes,
            "hours": self.hours,
            "days": self.days,
            "months": self.months,
            "years": self.years,
        }
        return {key: value for key, value in parts.items() if value is not None}


DEFAULT_DETAILS_DURATION = DetailsDuration(days=7)


# ──────────────────────────────────────────────
# Canonical records
# ──────────────────────────────────────────────

SubaccountName = str
ScalarHashrate = float


@dataclass(frozen=True)
class WorkerDetail:
    """A single worker on a subaccount."""

    id: Any  # minerId, passed through as the API returns it
    name: str
    coin: str
    updated_at: datetime
    status: str
    hashrate: float
    valid_shares: int
    stale_shares: int
    invalid_shares: int
    low_diff_shares: int
    bad_shares: int
    duplicate_shares: int
    revenue: str | None  # decimal string, precision preserved
    efficiency: float


@dataclass(frozen=True)
class WorkerHashratePoint:
    """One bucket of a hashrate history series."""

    time: datetime
    hashrate: float
    data_points: int


@dataclass(frozen=True)
class MiningSummary:
    """Mining overview for a subaccount over a duration."""

    username: str
    valid_shares: int
    invalid_shares: int
    stale_shares: int
    low_diff_shares: int
    bad_shares: int
    duplicate_shares: int
    revenue: str | None
    hashrate: float


@dataclass(frozen=True)
class SubaccountHashrateSeries:
    """Hashrate history for one subaccount."""

    username: str
    history: tuple[WorkerHashratePoint, ...]


@dataclass(frozen=True)
class HashrateScorePoint:
    """Daily hashrate score entry."""

    date: datetime
    efficiency: float
    hashrate: float
    revenue: float
    uptime_percentage: float
    uptime_total_minutes: int
    uptime_total_machines: int


@dataclass(frozen=True)
class Transaction:
    """A payout transaction."""

    id: str
    status: str
    amount: str  # decimal string, precision preserved
    created_at: datetime
    coin_price: float
