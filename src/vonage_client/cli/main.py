"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from vonage_client.client import Client
from vonage_client.config import Config
from vonage_client.messaging.message import Message


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="vonage-client", description="Vonage Messages and Meetings API client"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Read settings from YAML file (default: VONAGE_* environment variables)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log requests and responses to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # rooms
    rooms_parser = subparsers.add_parser("rooms", help="Meetings API rooms")
    rooms_sub = rooms_parser.add_subparsers(dest="action", required=True)
    rooms_list = rooms_sub.add_parser("list", help="List rooms, one JSON object per line")
    rooms_list.add_argument("--page-size", type=int, default=None, help="Rooms per page")
    rooms_list.add_argument("--start-id", type=str, default=None, help="First room ID")
    rooms_info = rooms_sub.add_parser("info", help="Show one room as JSON")
    rooms_info.add_argument("room_id", help="Room ID")

    # messages
    messages_parser = subparsers.add_parser("messages", help="Messages API")
    messages_sub = messages_parser.add_subparsers(dest="action", required=True)
    send_sms = messages_sub.add_parser("send-sms", help="Send an SMS")
    send_sms.add_argument("--to", required=True, help="Recipient number (E.164, no +)")
    send_sms.add_argument("--from", dest="sender", required=True, help="Sender number or name")
    send_sms.add_argument("--text", required=True, help="Message text")

    # verify-token
    verify_parser = subparsers.add_parser(
        "verify-token", help="Verify a Messages API webhook JWT signature"
    )
    verify_parser.add_argument("token", help="JWT from the webhook Authorization header")
    verify_parser.add_argument(
        "--secret",
        default=None,
        help="Signature secret (default: VONAGE_SIGNATURE_SECRET)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = Config.from_yaml(args.config) if args.config else Config()

    with Client(config) as client:
        if args.command == "rooms":
            _run_rooms(client, args)
        elif args.command == "messages":
            _run_messages(client, args)
        elif args.command == "verify-token":
            _run_verify(client, args)
        else:
            parser.print_help()


def _run_rooms(client: Client, args: argparse.Namespace) -> None:
    """Run rooms subcommands."""
    if args.action == "list":
        page = client.meetings.rooms.list(page_size=args.page_size, start_id=args.start_id)
        page.iterate(lambda room: print(json.dumps(room, default=str)))
    elif args.action == "info":
        room = client.meetings.rooms.info(args.room_id)
        print(json.dumps(room.entity.to_dict(), indent=2, default=str))


def _run_messages(client: Client, args: argparse.Namespace) -> None:
    """Run messages subcommands."""
    if args.action == "send-sms":
        resp = client.messaging.send(to=args.to, from_=args.sender, **Message.sms(args.text))
        body = resp.entity.to_dict() if resp.entity is not None else {}
        print(json.dumps(body, indent=2, default=str))


def _run_verify(client: Client, args: argparse.Namespace) -> None:
    """Run verify-token; exit status 1 when the signature does not verify."""
    if client.messaging.verify_webhook_token(args.token, signature_secret=args.secret):
        print("valid")
        return
    print("invalid")
    sys.exit(1)


if __name__ == "__main__":
    main()
