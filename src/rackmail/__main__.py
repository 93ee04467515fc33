"""Entry point: python -m rackmail"""

import argparse
import asyncio
import json
import logging
import sys

import httpx
from pydantic import ValidationError

from .client import RackmailClient
from .config import Settings
from .errors import RackmailError


def setup_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rackmail", description="Rackspace Email API command line client"
    )
    parser.add_argument("--debug", action="store_true", help="Dump HTTP requests and responses")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("domains", help="List all domains")

    domain = commands.add_parser("domain", help="Show one domain")
    domain.add_argument("name")

    aliases = commands.add_parser("aliases", help="List aliases of a domain")
    aliases.add_argument("domain")

    alias = commands.add_parser("alias", help="Show one alias")
    alias.add_argument("domain")
    alias.add_argument("alias")

    add = commands.add_parser("add-alias", help="Create an alias")
    add.add_argument("domain")
    add.add_argument("alias")
    add.add_argument("emails", nargs="+")

    delete = commands.add_parser("delete-alias", help="Delete an alias")
    delete.add_argument("domain")
    delete.add_argument("alias")

    return parser


async def run(client: RackmailClient, args: argparse.Namespace) -> object:
    if args.command == "domains":
        domains = await client.domains.list()
        return [d.model_dump(by_alias=True) for d in domains]
    if args.command == "domain":
        domain = await client.domains.show(args.name)
        return domain.model_dump(by_alias=True)
    if args.command == "aliases":
        aliases = await client.aliases.list(args.domain)
        return [a.model_dump(by_alias=True) for a in aliases]
    if args.command == "alias":
        detail = await client.aliases.show(args.domain, args.alias)
        return detail.model_dump(by_alias=True)
    if args.command == "add-alias":
        response = await client.aliases.add(args.domain, args.alias, args.emails)
        return {"status": response.status_code}
    if args.command == "delete-alias":
        response = await client.aliases.delete(args.domain, args.alias)
        return {"status": response.status_code}
    raise ValueError(f"Unknown command: {args.command}")


async def _main(settings: Settings, args: argparse.Namespace) -> object:
    async with RackmailClient(settings) as client:
        return await run(client, args)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    try:
        settings = Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        logger.error("Configuration error: %s", exc)
        logger.error("Set RACKMAIL_USER_KEY and RACKMAIL_SECRET_KEY in the environment or .env")
        sys.exit(1)

    if args.debug:
        settings.debug_http = True

    try:
        result = asyncio.run(_main(settings, args))
    except RackmailError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except httpx.TransportError as exc:
        logger.error("Request failed: %s", exc)
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
