"""
Config command group.

Commands:
    - config show [FIELDS...]       # Display the effective configuration
    - config set KEY VALUE          # Validate, update and save one field
    - config reset [FIELDS...]      # Reset fields (or everything) to defaults

Values are validated by the AppConfig model before anything is written,
so a bad value never reaches the config file.
"""

import logging

import click
from pydantic import ValidationError

from luxafor.exceptions import ConfigurationError, wrap_pydantic_error
from luxafor.models import AppConfig
from luxafor.models.config import DEFAULT_CONFIG_PATH
from ..errors import fail
from ..state import CliState

logger = logging.getLogger(__name__)

CHECK = "[OK]"


def _check_fields(fields) -> None:
    unknown = [field for field in fields if field not in AppConfig.model_fields]
    if unknown:
        raise click.BadParameter(
            f"Unknown field(s): {', '.join(unknown)}. "
            f"Valid fields: {', '.join(AppConfig.model_fields)}",
            param_hint="'FIELD'",
        )


@click.group(name="config")
def config():
    """Show or change the saved configuration."""
    pass


@config.command(name="show")
@click.argument("fields", nargs=-1, type=str)
@click.pass_obj
def show(state: CliState, fields: tuple[str, ...]):
    """
    Show the effective configuration.

    FIELDS: Optional field names to show (shows all if not specified)
    """
    _check_fields(fields)

    click.echo(f"Configuration file: {state.config_path or DEFAULT_CONFIG_PATH}")
    click.echo("")
    for field, field_info in AppConfig.model_fields.items():
        if fields and field not in fields:
            continue
        click.echo(f"  {field:20s} = {getattr(state.config, field)}")
        if field_info.description:
            click.echo(f"    {field_info.description}")


@config.command(name="set")
@click.argument("key", type=str)
@click.argument("value", type=str)
@click.pass_obj
def set_value(state: CliState, key: str, value: str):
    """Set KEY to VALUE and save the configuration file."""
    _check_fields((key,))
    path = state.config_path or DEFAULT_CONFIG_PATH

    try:
        # Start from the file, not the CLI overrides held in state
        current = AppConfig.load_or_default(path)
        try:
            updated = AppConfig.model_validate({**current.model_dump(), key: value})
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(path)) from e

        updated.save(path)
    except (ConfigurationError, OSError) as e:
        fail(e)

    logger.info(f"Set {key} to {getattr(updated, key)} in {path}")
    click.echo(f"{CHECK} {key} = {getattr(updated, key)}")
    click.echo(f"Configuration saved to {path}")


@config.command(name="reset")
@click.argument("fields", nargs=-1, type=str)
@click.confirmation_option(prompt="Are you sure you want to reset configuration?")
@click.pass_obj
def reset(state: CliState, fields: tuple[str, ...]):
    """
    Reset configuration to defaults.

    FIELDS: Optional field names to reset (resets all if not specified)
    """
    _check_fields(fields)
    path = state.config_path or DEFAULT_CONFIG_PATH
    defaults = AppConfig()

    try:
        if fields:
            current = AppConfig.load_or_default(path)
            updated = current.model_copy(update={field: getattr(defaults, field) for field in fields})
        else:
            updated = defaults
        updated.save(path)
    except (ConfigurationError, OSError) as e:
        fail(e)

    for field in fields or AppConfig.model_fields:
        click.echo(f"{CHECK} Reset {field} to default: {getattr(defaults, field)}")
    click.echo(f"Configuration saved to {path}")
