"""Command-line entry point for operators.

Examples:
  confirmations status
  confirmations send --to someone@example.com --name "Ama Mensah"
"""

import argparse
import asyncio
import sys

from confirmations.delivery import get_provider
from confirmations.domain import confirmations
from confirmations.registration.dispatch import ConfirmationDispatcher
from confirmations.registration.feedback import OperatorMessage
from confirmations.registration.request import RegistrationForm
from confirmations.registration.status import SendOutcome
from confirmations.utils.logging import configure_logging

EXIT_SUCCESS = 0
EXIT_SEND_FAILED = 1
EXIT_REJECTED = 2


def build_parser() -> argparse.ArgumentParser:
    defaults = RegistrationForm()
    parser = argparse.ArgumentParser(
        prog="confirmations",
        description="Send event-registration confirmation emails",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", help="Show delivery provider configuration status")

    send = subparsers.add_parser("send", help="Send one confirmation email")
    send.add_argument("--to", dest="to_email", default="", help="Recipient email address")
    send.add_argument("--name", dest="to_name", default=defaults.to_name, help="Recipient name")
    send.add_argument("--event-title", default=defaults.event_title)
    send.add_argument("--event-date", default=defaults.event_date)
    send.add_argument("--event-time", default=defaults.event_time)
    send.add_argument("--event-location", default=defaults.event_location)
    send.add_argument("--event-price", default=defaults.event_price)
    return parser


def _print_message(message: OperatorMessage) -> None:
    print(f"{message.title}: {message.description}")


def run_status(dispatcher: ConfirmationDispatcher) -> int:
    status = dispatcher.configuration_status()
    print(status.message)
    return EXIT_SUCCESS if status.configured else EXIT_REJECTED


def run_send(dispatcher: ConfirmationDispatcher, args: argparse.Namespace) -> int:
    form = RegistrationForm(
        to_email=args.to_email,
        to_name=args.to_name,
        event_title=args.event_title,
        event_date=args.event_date,
        event_time=args.event_time,
        event_location=args.event_location,
        event_price=args.event_price,
    )
    result = asyncio.run(dispatcher.send(form))

    if result.rejected:
        return EXIT_REJECTED
    if result.outcome == SendOutcome.SUCCESS:
        print(f"Confirmation number: {result.confirmation_number}")
        return EXIT_SUCCESS
    return EXIT_SEND_FAILED


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging()
    confirmations.init()

    with confirmations.domain_context():
        dispatcher = ConfirmationDispatcher(get_provider(), notify=_print_message)
        if args.command == "status":
            return run_status(dispatcher)
        return run_send(dispatcher, args)


if __name__ == "__main__":
    sys.exit(main())
