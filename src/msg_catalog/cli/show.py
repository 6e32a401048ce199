"""Show one message from the catalog.

CLI that resolves a code, applies parameters and prints it in the chosen
format (json, xml, text, console or log).
"""

import json
import os

import click
import dotenv

from msg_catalog.config import Settings, get_settings
from msg_catalog.errors import FormatterNotFoundError, InvalidParameterShapeError, MessageNotFoundError
from msg_catalog.formatters.options import FormatterConfiguration, preset
from msg_catalog.formatters.registry import FormatterRegistry
from msg_catalog.pipeline import InterceptorPipeline
from msg_catalog.registry import MessageRegistry
from msg_catalog.setup import configure_from_settings
from msg_catalog.store_file import FileMessageStore


def load_settings() -> Settings:
    """Load .env (when present) into the environment and return the settings."""
    if os.path.exists(".env"):
        dotenv.load_dotenv()
    return get_settings()


def parse_params(params: str | None) -> dict | None:
    """Decode the --params JSON object."""
    if not params:
        return None
    try:
        value = json.loads(params)
    except json.JSONDecodeError as err:
        raise click.ClickException(f"Invalid JSON for --params: {params}") from err
    if not isinstance(value, dict):
        raise click.ClickException("--params must be a JSON object")
    return value


@click.command()
@click.option("--code", type=str, required=True, help="The message code to show, e.g. AUTH_001")
@click.option("--format", "format_name", type=str, default="console", help="json, xml, text, console or log")
@click.option("--params", type=str, required=False, help="Substitution parameters (JSON object)")
@click.option(
    "--catalog-file",
    "catalog_files",
    type=str,
    multiple=True,
    help="JSON catalog overriding the defaults; may be repeated, last wins",
)
@click.option("--correlation-id", type=str, required=False, help="Correlation ID to attach")
@click.option("--preset", "preset_name", type=str, required=False, help="Formatter options preset")
def main(
    code: str,
    format_name: str,
    params: str | None,
    catalog_files: tuple[str, ...],
    correlation_id: str | None,
    preset_name: str | None,
) -> str:
    """Resolve a message code and print it."""
    settings = load_settings()
    registry = MessageRegistry()
    pipeline = InterceptorPipeline()
    configuration = FormatterConfiguration()
    try:
        configure_from_settings(
            settings,
            registry=registry,
            pipeline=pipeline,
            formatter_configuration=configuration,
            extra_stores=[FileMessageStore(path) for path in catalog_files],
        )
        if preset_name:
            configuration.set_options(preset(preset_name))
    except ValueError as err:
        raise click.ClickException(str(err)) from err

    try:
        message = registry.get(code)
        message = message.with_params_if_provided(parse_params(params))
    except (MessageNotFoundError, InvalidParameterShapeError) as err:
        raise click.ClickException(str(err)) from err

    if correlation_id:
        message = message.with_correlation_id(correlation_id)

    formatters = FormatterRegistry(pipeline=pipeline, configuration=configuration)
    try:
        output = formatters.get(format_name).format(message)
    except FormatterNotFoundError as err:
        raise click.ClickException(str(err)) from err

    click.echo(output)
    return output


if __name__ == "__main__":
    main()
