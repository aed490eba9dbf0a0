import logging

import click
from pydantic import ValidationError

from api_access.infrastructure.cli.api_access_commands import (
    api_access_add,
    api_access_edit,
    api_access_list,
    api_access_show,
)
from api_access.infrastructure.config import ApiAccessSettings


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Overrides API_ACCESS_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """API access management"""
    try:
        settings = ApiAccessSettings()
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration:\n{exc}")

    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


# Register subcommands
cli.add_command(api_access_add)
cli.add_command(api_access_edit)
cli.add_command(api_access_list)
cli.add_command(api_access_show)
