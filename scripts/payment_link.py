#!/usr/bin/env python3
"""
Payment link tool.

Encode payment requests into deep links / web links and inspect existing
links.

Usage:
    python scripts/payment_link.py encode --to 0x... --amount 1.5 --token USDC --label "Coffee"
    python scripts/payment_link.py web --to 0x... --amount 1.5 --base-url https://pay.monad.link
    python scripts/payment_link.py decode "monadpay://send?to=0x...&amount=1.5"
    python scripts/payment_link.py parse "monadpay://send?to=0x...&amount=1.5"
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from monadpay.config.tokens import get_token_by_symbol
from monadpay.logging import setup_logging
from monadpay.models import PaymentRequest
from monadpay.services.deeplink import (
    decode_payment_link_verbose,
    encode_payment_link,
    encode_web_payment_link,
    parse_deep_link,
)


# Configure logger
setup_logging()


def build_request(args: argparse.Namespace) -> PaymentRequest:
    """Build a payment request from CLI arguments (token may be a symbol)."""
    token = args.token
    if token:
        info = get_token_by_symbol(token)
        if info is not None:
            token = None if info.is_native else info.address

    return PaymentRequest(
        to=args.to,
        amount=args.amount,
        token=token,
        label=args.label,
        memo=args.memo,
        chain_id=args.chain_id,
    )


def add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--to", required=True, help="Recipient address")
    parser.add_argument("--amount", required=True, help="Amount, e.g. 1.5")
    parser.add_argument("--token", help="Token symbol (MON, USDC, USDT) or address")
    parser.add_argument("--label", help="Payment label")
    parser.add_argument("--memo", help="Payment memo")
    parser.add_argument("--chain-id", type=int, help="Chain id (default: omitted)")


def main() -> int:
    parser = argparse.ArgumentParser(description="Encode and decode MonadPay payment links")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_request_arguments(subparsers.add_parser("encode", help="Build a deep link"))

    web_parser = subparsers.add_parser("web", help="Build a web fallback link")
    add_request_arguments(web_parser)
    web_parser.add_argument("--base-url", help="Web app base URL")

    decode_parser = subparsers.add_parser("decode", help="Decode a deep link or web link")
    decode_parser.add_argument("uri")

    parse_parser = subparsers.add_parser("parse", help="Parse a deep link")
    parse_parser.add_argument("uri")

    args = parser.parse_args()

    if args.command in ("encode", "web"):
        try:
            request = build_request(args)
        except PydanticValidationError as e:
            logger.error(f"Invalid payment request: {e.errors()[0]['msg']}")
            return 1

        if args.command == "encode":
            print(encode_payment_link(request))
        else:
            print(encode_web_payment_link(request, args.base_url))
        return 0

    if args.command == "decode":
        request, error = decode_payment_link_verbose(args.uri)
        if error is not None:
            logger.error(f"Cannot decode link ({error.code}): {error.message}")
            return 1
        print(json.dumps(request.model_dump(by_alias=True, exclude_none=True), indent=2))
        return 0

    schema = parse_deep_link(args.uri)
    if schema is None:
        logger.error("Not a valid deep link")
        return 1
    print(json.dumps(schema.model_dump(by_alias=True, exclude_none=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
