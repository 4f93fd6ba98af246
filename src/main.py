"""
Command line entry point.

Usage:
    python -m src.main [OPTIONS] COMMAND [ARGS]

Commands:
    parse-uri       Parse a payment URI and print the request as JSON
    encode-uri      Build a payment URI from an address and native amount
    resolve-fees    Print the fee schedule (and optionally fee parameters) for a network
    seed-wallet     Seed engine defaults into a wallet's stored otherData

Examples:
    # Parse with whichever plugin owns the scheme
    python -m src.main parse-uri "eos:abcdefghijkl?amount=1.5000"

    # Parse a bare address with an explicit plugin
    python -m src.main parse-uri rf1BiGeXwwQoi8Z2ueFYTEXSwuJYfV2Jpn --plugin ripple

    # Encode 1 ETH
    python -m src.main encode-uri --plugin ethereum \\
        --address 0x89205A3A3b2A69De6Dbf7f01ED13B2108B2c43e7 --amount 1000000000000000000

    # Standard-tier gas price for a 1 ETH spend on an unknown network
    python -m src.main resolve-fees unknown-network --fee-option standard --amount 1000000000000000000
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Optional

from src.application.services.fee_schedule import select_fee_parameters
from src.domain.entities.fee_schedule import FeeOption
from src.domain.entities.payment_request import EncodeRequest
from src.domain.errors import FeeScheduleConfigError, PluginRegistryError, WalletPluginError
from src.infrastructure.config import get_settings
from src.infrastructure.container import Container, cleanup_container, create_container
from src.infrastructure.logging import get_logger, setup_logging


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Wallet plugin core - payment URIs and network fees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from config)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Output logs as JSON",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse-uri", help="Parse a payment URI")
    parse_cmd.add_argument("uri", help="Payment URI, redirect link or bare address")
    parse_cmd.add_argument("--plugin", help="Plugin id (required for bare addresses)")

    encode_cmd = commands.add_parser("encode-uri", help="Build a payment URI")
    encode_cmd.add_argument("--plugin", required=True, help="Plugin id")
    encode_cmd.add_argument("--address", required=True, help="Recipient public address")
    encode_cmd.add_argument("--amount", help="Native amount (smallest units)")
    encode_cmd.add_argument("--currency-code", help="Denomination for the amount")
    encode_cmd.add_argument("--unique-id", help="Destination tag / memo")
    encode_cmd.add_argument("--label", help="Payee label")
    encode_cmd.add_argument("--message", help="Payment note")

    fees_cmd = commands.add_parser("resolve-fees", help="Resolve a network fee schedule")
    fees_cmd.add_argument("network_id", help="Network identifier")
    fees_cmd.add_argument("--plugin", default="ethereum", help="Plugin id (default: ethereum)")
    fees_cmd.add_argument(
        "--fee-option",
        choices=[option.value for option in FeeOption if option != FeeOption.CUSTOM],
        help="Also select gas price/limit for this tier",
    )
    fees_cmd.add_argument("--amount", default="0", help="Native spend amount for the standard tier")
    fees_cmd.add_argument("--token", action="store_true", help="Use the token gas limit")

    seed_cmd = commands.add_parser("seed-wallet", help="Seed engine defaults for a wallet")
    seed_cmd.add_argument("wallet_id", help="Wallet identifier in the JSON store")
    seed_cmd.add_argument("--plugin", required=True, help="Plugin id")

    return parser.parse_args(argv)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def run_command(container: Container, args: argparse.Namespace) -> dict[str, Any]:
    """Execute one subcommand and return its JSON-serializable output."""
    if args.command == "parse-uri":
        if args.plugin:
            parsed = container.plugin(args.plugin).parse_uri(args.uri)
        else:
            parsed = container.registry.parse_payment_uri(args.uri)
        return parsed.to_dict()

    if args.command == "encode-uri":
        request = EncodeRequest(
            public_address=args.address,
            native_amount=args.amount,
            currency_code=args.currency_code,
            unique_identifier=args.unique_id,
            label=args.label,
            message=args.message,
        )
        return {"uri": container.plugin(args.plugin).encode_uri(request)}

    if args.command == "resolve-fees":
        schedule = container.plugin(args.plugin).resolve_fees(args.network_id)
        output: dict[str, Any] = {"network_id": schedule.network_id, **schedule.to_dict()}
        if args.fee_option:
            params = select_fee_parameters(
                schedule,
                fee_option=FeeOption(args.fee_option),
                native_amount=args.amount,
                is_token=args.token,
            )
            output["selected"] = {
                "gasPrice": params.gas_price,
                "gasLimit": params.gas_limit,
                "maxFee": params.max_fee,
            }
        return output

    if args.command == "seed-wallet":
        plugin = container.plugin(args.plugin)
        context = container.wallet_context(args.wallet_id)
        return asyncio.run(plugin.seed_engine_defaults(context))

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)
    settings = get_settings()

    setup_logging(
        log_level=args.log_level or settings.log_level,
        json_format=args.json_logs or settings.json_logs,
    )
    logger = get_logger(__name__)

    try:
        container = create_container(settings)
        _print_json(run_command(container, args))
        return 0

    except WalletPluginError as e:
        logger.warning("command_failed", command=args.command, kind=e.kind.value)
        _print_json({"error": e.kind.value, "message": e.message})
        return 1

    except (FeeScheduleConfigError, PluginRegistryError, ValueError) as e:
        logger.error("configuration_error", command=args.command, error=str(e))
        _print_json({"error": type(e).__name__, "message": str(e)})
        return 2

    finally:
        cleanup_container()


if __name__ == "__main__":
    sys.exit(main())
