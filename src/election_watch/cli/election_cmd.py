"""CLI commands for election lookups against the civic-data provider.

Each command makes one provider call and prints the normalized result as
JSON on stdout, using the same camelCase shape as the HTTP API.
"""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING, Annotated

import typer

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from pydantic import BaseModel

    from election_watch.lib.civic import GoogleCivicClient

election_app = typer.Typer()


@election_app.command("list")
def list_command() -> None:
    """List upcoming elections known to the provider."""
    from election_watch.services import election_service

    asyncio.run(_run(election_service.list_elections))


@election_app.command("voter-info")
def voter_info(
    address: Annotated[str, typer.Argument(help="Registered voting address")],
    election_id: Annotated[
        str | None, typer.Option("--election-id", help="Provider election id (defaults to the next election)")
    ] = None,
) -> None:
    """Resolve an address to its election, ballot contests, and polling places."""
    from election_watch.services import election_service

    _require_address(address)
    asyncio.run(_run(lambda client: election_service.resolve_voter_info(client, address.strip(), election_id)))


@election_app.command("representatives")
def representatives(
    address: Annotated[str, typer.Argument(help="Address to look up")],
    levels: Annotated[str | None, typer.Option("--levels", help="Comma-separated government levels")] = None,
    roles: Annotated[str | None, typer.Option("--roles", help="Comma-separated office roles")] = None,
) -> None:
    """Look up elected representatives for an address."""
    from election_watch.services import election_service

    _require_address(address)
    asyncio.run(
        _run(
            lambda client: election_service.lookup_representatives(
                client,
                address.strip(),
                levels=election_service.parse_csv_filter(levels),
                roles=election_service.parse_csv_filter(roles),
            )
        )
    )


def _require_address(address: str) -> None:
    if not address.strip():
        typer.echo("Error: Address parameter is required", err=True)
        raise typer.Exit(code=1)


async def _run(operation: Callable[[GoogleCivicClient], Awaitable[BaseModel | dict]]) -> None:
    """Build the provider client, run one operation, and print its result."""
    from election_watch.core.config import get_settings
    from election_watch.core.dependencies import build_civic_client
    from election_watch.lib.civic.errors import CivicProviderError

    try:
        client = build_civic_client(get_settings())
    except CivicProviderError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e

    try:
        result = await operation(client)
    except CivicProviderError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e
    finally:
        await client.close()

    if isinstance(result, dict):
        typer.echo(json.dumps(result, indent=2))
    else:
        typer.echo(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))
