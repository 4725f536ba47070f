import argparse
import asyncio
import sys

from dotenv import load_dotenv
from loguru import logger

from sipgate_team_bridge.adapter import SipgateTeamAdapter
from sipgate_team_bridge.app_config import load_json_config, parse_app_config, resolve_api_key
from sipgate_team_bridge.bridge.adapter import ServerError
from sipgate_team_bridge.bridge.models import Config
from sipgate_team_bridge.contact_formatter import format_contact_summary
from sipgate_team_bridge.logging_config import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sipgate_team_bridge", description="sipgate Team contact bridge")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List shared and private contacts")
    delete = sub.add_parser("delete", help="Delete a contact by id")
    delete.add_argument("id")
    return parser


async def run(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    load_dotenv()
    app = parse_app_config(load_json_config())
    setup_logging(level=app.log_level, consumers=app.log_consumers)

    api_key = resolve_api_key()
    if not api_key:
        logger.error("SIPGATE_API_KEY environment variable is required.")
        return 1

    adapter = SipgateTeamAdapter(
        api_base_url=app.api_base_url,
        contacts_url=app.contacts_url,
        timeout_seconds=app.timeout_seconds,
        page_size=app.page_size,
    )
    config = Config(api_key=api_key)

    try:
        if args.command == "list":
            contacts = await adapter.get_contacts(config)
            if not contacts:
                print("No contacts found.")
            else:
                print("\n\n".join(format_contact_summary(c) for c in contacts))
        elif args.command == "delete":
            await adapter.delete_contact(config, args.id)
            print(f"Contact '{args.id}' deleted successfully.")
    except ServerError as ex:
        logger.error(f"{args.command} failed with status {ex.status}: {ex.message}")
        return 1

    return 0


def main() -> None:
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
