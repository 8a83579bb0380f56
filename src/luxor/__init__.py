"""Luxor mining pool API client with precise response normalization."""

from luxor.client import LuxorClient
from luxor.config import AppSettings, LuxorSettings
from luxor.exceptions import (
    InvalidNumericLiteral,
    InvalidTimestamp,
    LuxorError,
    MalformedResponseShape,
    MissingCredential,
    ResponseDataError,
    TransportError,
    UnknownUnit,
)
from luxor.models import (
    DetailsDuration,
    HashRateUnit,
    HashrateInterval,
    HashrateScorePoint,
    MiningProfileName,
    MiningSummary,
    Pagination,
    SubaccountHashrateSeries,
    Transaction,
    WorkerDetail,
    WorkerHashratePoint,
)

__all__ = [
    "AppSettings",
    "DetailsDuration",
    "HashRateUnit",
    "HashrateInterval",
    "HashrateScorePoint",
    "InvalidNumericLiteral",
    "InvalidTimestamp",
    "LuxorClient",
    "LuxorError",
    "LuxorSettings",
    "MalformedResponseShape",
    "MiningProfileName",
    "MiningSummary",
    "MissingCredential",
    "Pagination",
    "ResponseDataError",
    "SubaccountHashrateSeries",
    "Transaction",
    "TransportError",
    "UnknownUnit",
    "WorkerDetail",
    "WorkerHashratePoint",
]
