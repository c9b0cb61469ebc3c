"""Command-line interface: ``upi-dispatch {link,pay,parse-response}``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from upi_dispatch.application.use_cases import (
    DispatchOutcome,
    InitiatePaymentRequest,
    InitiatePaymentUseCase,
)
from upi_dispatch.config import load_settings
from upi_dispatch.domain.entities import PaymentResult
from upi_dispatch.domain.exceptions import DomainException
from upi_dispatch.domain.value_objects import CorrelationToken, PaymentRequest
from upi_dispatch.infrastructure import (
    ConsoleUserNotifier,
    InMemoryLockProvider,
    InMemoryPendingPaymentRepository,
    SystemIntentResolver,
    SystemTimeProvider,
)
from upi_dispatch.logging_setup import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from upi_dispatch.config import Settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DOMAIN_ERROR = 2


def _add_payment_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--amount", required=True, help='amount as text, e.g. "100.00"')
    parser.add_argument("--note", default="", help="transaction note")
    parser.add_argument("--name", default="", dest="payee_name", help="payee display name")
    parser.add_argument(
        "--address", required=True, dest="payee_address", help="payee UPI address (VPA)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upi-dispatch",
        description="Build UPI payment deep links and open them in a payment app.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    link = subparsers.add_parser("link", help="print the upi://pay URI")
    _add_payment_arguments(link)

    pay = subparsers.add_parser("pay", help="open the URI in an installed UPI app")
    _add_payment_arguments(pay)
    pay.add_argument(
        "--request-code",
        type=int,
        default=None,
        help="correlation token for the result (default: UPI_DISPATCH_REQUEST_CODE or 101)",
    )

    parse_response = subparsers.add_parser(
        "parse-response", help="decode the response string a UPI app returned"
    )
    parse_response.add_argument("raw_response", help='e.g. "txnId=..&Status=SUCCESS"')

    return parser


def _payment_from_args(args: argparse.Namespace) -> PaymentRequest:
    return PaymentRequest(
        amount=args.amount,
        note=args.note,
        payee_name=args.payee_name,
        payee_address=args.payee_address,
    )


def _run_pay(args: argparse.Namespace, settings: Settings) -> int:
    if args.request_code is not None:
        token = CorrelationToken(value=args.request_code)
    else:
        token = settings.correlation_token()

    use_case = InitiatePaymentUseCase(
        intent_resolver=SystemIntentResolver(),
        user_notifier=ConsoleUserNotifier(),
        lock_provider=InMemoryLockProvider(),
        time_provider=SystemTimeProvider(),
        pending_payment_repository=InMemoryPendingPaymentRepository(),
        chooser_title=settings.chooser_title,
        no_handler_message=settings.no_handler_message,
    )
    response = use_case.execute(
        InitiatePaymentRequest(payment=_payment_from_args(args), correlation_token=token)
    )

    if response.outcome == DispatchOutcome.DISPATCHED:
        print(response.uri)
    # NO_HANDLER was already reported to the user by the notifier
    return EXIT_OK


def _run_parse_response(args: argparse.Namespace) -> int:
    result = PaymentResult.from_response(args.raw_response)
    print(f"status: {result.status.value}")
    for label, value in (
        ("transaction_id", result.transaction_id),
        ("response_code", result.response_code),
        ("approval_ref", result.approval_ref),
        ("transaction_ref", result.transaction_ref),
    ):
        if value is not None:
            print(f"{label}: {value}")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        if args.command == "link":
            print(_payment_from_args(args).to_uri())
            return EXIT_OK
        if args.command == "pay":
            return _run_pay(args, settings)
        return _run_parse_response(args)
    except DomainException as error:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {error}", file=sys.stderr)
        return EXIT_DOMAIN_ERROR


if __name__ == "__main__":
    sys.exit(main())
