"""CLI commands for the ApiAccess aggregate."""

from __future__ import annotations

import click

from api_access.application.dto import (
    AddApiAccessCommand,
    EditApiAccessCommand,
    EditableApiAccess,
    GetApiAccessForEditing,
)
from api_access.domain.exceptions import ApiAccessConstraintException, DomainException
from api_access.domain.model.api_access import UNSET
from api_access.infrastructure import bootstrap
from api_access.infrastructure.config import ApiAccessSettings


def _fail(exc: DomainException) -> click.ClickException:
    if isinstance(exc, ApiAccessConstraintException):
        return click.ClickException(f"[{int(exc.code)} {exc.code.name}] {exc}")
    return click.ClickException(str(exc))


def _echo_api_access(dto: EditableApiAccess) -> None:
    click.echo(f"ID:            {dto.api_access_id}")
    click.echo(f"Client name:   {dto.client_name}")
    click.echo(f"API client ID: {dto.api_client_id}")
    click.echo(f"Enabled:       {'yes' if dto.enabled else 'no'}")
    click.echo(f"Description:   {dto.description}")


@click.command("add")
@click.option("--client-name", required=True, help="Human readable client label.")
@click.option("--api-client-id", required=True, help="Unique machine client identifier.")
@click.option("--enabled/--disabled", default=True, show_default=True)
@click.option("--description", default="", help="Free text description.")
@click.pass_obj
def api_access_add(
    settings: ApiAccessSettings,
    client_name: str,
    api_client_id: str,
    enabled: bool,
    description: str,
) -> None:
    """Create a new API access."""
    handler = bootstrap.add_api_access_handler(settings)

    try:
        api_access_id = handler.handle(
            AddApiAccessCommand(
                client_name=client_name,
                api_client_id=api_client_id,
                enabled=enabled,
                description=description,
            )
        )
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Api access #{api_access_id} '{client_name}' created")


@click.command("edit")
@click.option("--id", "api_access_id", required=True, type=int, help="Api access ID.")
@click.option("--client-name", default=None, help="New client label.")
@click.option("--api-client-id", default=None, help="New machine client identifier.")
@click.option("--enabled/--disabled", default=None)
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def api_access_edit(
    settings: ApiAccessSettings,
    api_access_id: int,
    client_name: str | None,
    api_client_id: str | None,
    enabled: bool | None,
    description: str | None,
) -> None:
    """Change some fields of an API access; omitted options are left as is."""
    handler = bootstrap.edit_api_access_handler(settings)
    command = EditApiAccessCommand(
        api_access_id=api_access_id,
        client_name=UNSET if client_name is None else client_name,
        api_client_id=UNSET if api_client_id is None else api_client_id,
        enabled=UNSET if enabled is None else enabled,
        description=UNSET if description is None else description,
    )

    try:
        handler.handle(command)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Api access #{api_access_id} updated")


@click.command("show")
@click.option("--id", "api_access_id", required=True, type=int, help="Api access ID.")
@click.pass_obj
def api_access_show(settings: ApiAccessSettings, api_access_id: int) -> None:
    """Show one API access."""
    handler = bootstrap.get_api_access_for_editing_handler(settings)

    try:
        dto = handler.handle(GetApiAccessForEditing(api_access_id))
    except DomainException as exc:
        raise _fail(exc)

    _echo_api_access(dto)


@click.command("list")
@click.pass_obj
def api_access_list(settings: ApiAccessSettings) -> None:
    """List all API accesses."""
    api_accesses = bootstrap.api_access_store(settings).list_all()

    if not api_accesses:
        click.echo("No api accesses found.")
        return

    click.echo(f"{'ID':<6} {'Client name':<24} {'API client ID':<24} {'Enabled':<7}")
    click.echo("-" * 64)
    for a in api_accesses:
        enabled = "yes" if a.enabled else "no"
        click.echo(f"{str(a.id):<6} {a.client_name:<24} {a.api_client_id:<24} {enabled:<7}")
