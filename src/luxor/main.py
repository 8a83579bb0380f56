"""Command-line entry point for the Luxor pool client.

Loads AppSettings from the environment / .env, configures logging, runs one
query and prints the normalized result as JSON on stdout.

Examples:
    luxor-pool subaccounts
    luxor-pool workers my-subaccount --units TH
    luxor-pool summary my-subaccount --duration _1_DAY
    luxor-pool worker-hashrate my-subaccount rig-01 --bucket _1_HOUR --units TH
"""

import argparse
import asyncio
import dataclasses
import json
import sys
from collections.abc import Sequence
from typing import Any

from luxor.client import LuxorClient
from luxor.config import AppSettings
from luxor.exceptions import LuxorError
from luxor.logging import get_logger, setup_logging
from luxor.models import HashRateUnit, HashrateInterval, MiningProfileName, Pagination

logger = get_logger("luxor.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="luxor-pool", description=__doc__.splitlines()[0])
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--coin", choices=[c.value for c in MiningProfileName])
    common.add_argument("--units", choices=[u.value for u in HashRateUnit])

    paged = argparse.ArgumentParser(add_help=False)
    paged.add_argument("--first", type=int)
    paged.add_argument("--last", type=int)
    paged.add_argument("--offset", type=int)

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("subaccounts", parents=[paged], help="list subaccounts")

    workers = sub.add_parser("workers", parents=[common, paged], help="worker details")
    workers.add_argument("subaccount")

    summary = sub.add_parser("summary", parents=[common], help="mining summary")
    summary.add_argument("subaccount")
    summary.add_argument(
        "--duration",
        choices=[i.value for i in HashrateInterval],
        default=HashrateInterval.ONE_DAY.value,
    )

    transactions = sub.add_parser(
        "transactions", parents=[common, paged], help="transaction history"
    )
    transactions.add_argument("subaccount")

    intervals = [i.value for i in HashrateInterval]

    worker_hashrate = sub.add_parser(
        "worker-hashrate", parents=[common, paged], help="worker hashrate history"
    )
    worker_hashrate.add_argument("subaccount")
    worker_hashrate.add_argument("worker")
    worker_hashrate.add_argument(
        "--duration", choices=intervals, default=HashrateInterval.ONE_DAY.value
    )
    worker_hashrate.add_argument(
        "--bucket", choices=intervals, default=HashrateInterval.ONE_HOUR.value
    )

    subaccounts_hashrate = sub.add_parser(
        "subaccounts-hashrate",
        parents=[common, paged],
        help="hashrate history of every subaccount",
    )
    subaccounts_hashrate.add_argument(
        "--interval", choices=intervals, default=HashrateInterval.ONE_HOUR.value
    )

    score = sub.add_parser(
        "hashrate-score", parents=[common, paged], help="hashrate score history"
    )
    score.add_argument("subaccount")

    sub.add_parser("profile-hashrate", parents=[common], help="profile hashrate")
    sub.add_parser("pool-hashrate", parents=[common], help="pool hashrate")
    return parser


def _pagination(args: argparse.Namespace) -> Pagination | None:
    if args.first is None and args.last is None and args.offset is None:
        return None
    return Pagination(first=args.first, last=args.last, offset=args.offset)


async def run_command(client: LuxorClient, args: argparse.Namespace) -> Any:
    """Dispatch a parsed command to the matching client call."""
    if args.command == "subaccounts":
        return await client.get_subaccounts(_pagination(args))
    if args.command == "workers":
        return await client.get_worker_details(
            args.subaccount,
            coin=args.coin,
            units=args.units,
            pagination=_pagination(args),
        )
    if args.command == "summary":
        return await client.get_subaccount_summary(
            args.subaccount, args.duration, units=args.units, coin=args.coin
        )
    if args.command == "transactions":
        return await client.get_transaction_history(
            args.subaccount, coin=args.coin, pagination=_pagination(args)
        )
    if args.command == "worker-hashrate":
        return await client.get_worker_hashrate(
            args.subaccount,
            args.worker,
            args.duration,
            args.bucket,
            coin=args.coin,
            units=args.units,
            pagination=_pagination(args),
        )
    if args.command == "subaccounts-hashrate":
        return await client.get_all_subaccounts_hashrate(
            args.interval,
            units=args.units,
            coin=args.coin,
            pagination=_pagination(args),
        )
    if args.command == "hashrate-score":
        return await client.get_profile_hashrate_score(
            args.subaccount,
            units=args.units,
            coin=args.coin,
            pagination=_pagination(args),
        )
    if args.command == "profile-hashrate":
        return await client.get_profile_hashrate(units=args.units, coin=args.coin)
    if args.command == "pool-hashrate":
        return await client.get_pool_hashrate(units=args.units, coin=args.coin)
    raise ValueError(f"Unknown command: {args.command}")


def to_jsonable(result: Any) -> Any:
    if dataclasses.is_dataclass(result) and not isinstance(result, type):
        return dataclasses.asdict(result)
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    return result


async def _run(settings: AppSettings, args: argparse.Namespace) -> Any:
    async with LuxorClient.from_settings(settings.luxor) as client:
        return await run_command(client, args)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)

    try:
        result = asyncio.run(_run(settings, args))
    except LuxorError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        return 1

    json.dump(to_jsonable(result), sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
