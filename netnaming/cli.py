"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from netnaming.core.errors import NetNamingError
from netnaming.core.model import NamePolicy
from netnaming.core.policy import alternative_names_policy_to_string, name_policy_to_string
from netnaming.core.schemes import LATEST_ALIAS
from netnaming.core.service import SYSATTR_KINDS, NamingService

app = typer.Typer(help="Inspect network interface naming schemes and sysattr visibility")


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log scheme resolution to stderr"),
) -> None:
    """Inspect network interface naming schemes and sysattr visibility."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


@app.command("scheme")
def show_scheme() -> None:
    """Show the naming scheme in effect for this system."""
    try:
        scheme = NamingService().naming_scheme()
        typer.echo(scheme.name)
        for flag in scheme.enabled_flags():
            typer.echo(f"  {flag.name.lower()}")
    except NetNamingError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("schemes")
def list_schemes() -> None:
    """List known naming schemes, oldest first."""
    service = NamingService()
    latest = service.find_scheme(LATEST_ALIAS)
    for scheme in service.list_schemes():
        marker = f" ({LATEST_ALIAS})" if scheme is latest else ""
        typer.echo(f"{scheme.name}{marker}")


@app.command("lookup")
def lookup_scheme(name: str) -> None:
    """Show the flags of a naming scheme by name or alias."""
    scheme = NamingService().find_scheme(name)
    if scheme is None:
        typer.echo(f"Error: Unknown naming scheme '{name}'", err=True)
        raise typer.Exit(code=1)
    typer.echo(scheme.name)
    for flag in scheme.enabled_flags():
        typer.echo(f"  {flag.name.lower()}")


@app.command("policies")
def list_policies(
    alternative: bool = typer.Option(False, "--alternative", help="Only policies valid for alternative names"),
) -> None:
    """List interface name policies."""
    to_string = alternative_names_policy_to_string if alternative else name_policy_to_string
    for policy in NamePolicy:
        name = to_string(policy)
        if name is not None:
            typer.echo(name)


@app.command("sysattr")
def read_sysattr(
    sysattr: str,
    ifname: str | None = typer.Option(None, "--ifname", help="Network interface name"),
    device: Path | None = typer.Option(None, "--device", help="YAML device description"),
    kind: str = typer.Option("string", "--type", help=f"Value type: {', '.join(SYSATTR_KINDS)}"),
) -> None:
    """Read a sysattr, honouring ID_NET_NAME_ALLOW* properties."""
    try:
        service = NamingService()
        handle, store = service.open_device(ifname=ifname, path=device)
        value = service.read_sysattr(handle, store, sysattr, kind)
        typer.echo(_format_value(value))
    except NetNamingError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


def run() -> None:
    app()


if __name__ == "__main__":
    run()
