"""Inspect message catalogs.

CLI that lists the merged codes, prints counts per message type or
validates catalog files.
"""

from collections import Counter

import click
from icecream import ic

from msg_catalog.cli.show import load_settings
from msg_catalog.registry import MessageRegistry
from msg_catalog.setup import build_stores
from msg_catalog.store_file import FileMessageStore
from msg_catalog.templates import MessageType


def catalog_stats(registry: MessageRegistry) -> dict:
    """Return the number of codes per message type plus the total."""
    counts = Counter()
    for code in registry.get_all_codes():
        template = registry.get_template(code)
        counts[(template.type or MessageType.INFO).label] += 1
    stats = {label: counts.get(label, 0) for label in (t.label for t in MessageType)}
    stats["total"] = sum(counts.values())
    return stats


def validate_files(paths: tuple[str, ...]) -> int:
    """Parse every file, report each one and return the number that failed."""
    failed = 0
    for path in paths:
        result = FileMessageStore(path).try_load()
        if result.ok:
            click.secho(f"{path}: {len(result.templates)} message(s)", fg="green")
        else:
            failed += 1
            click.secho(f"{path}: {result.failure.message}", fg="red")
    return failed


@click.command()
@click.option("--action", type=str, required=True, help="list, stats or validate")
@click.option(
    "--catalog-file",
    "catalog_files",
    type=str,
    multiple=True,
    help="JSON catalog to include (list, stats) or check (validate); may be repeated",
)
@click.option("--no-defaults", is_flag=True, default=False, help="Leave the bundled catalog out")
def main(action: str, catalog_files: tuple[str, ...], no_defaults: bool) -> list | dict | int:
    """Run an action against the merged catalog or the given files."""
    click.echo(f"Catalog {action}")

    if action == "validate":
        if not catalog_files:
            raise click.ClickException("validate needs at least one --catalog-file")
        failed = validate_files(catalog_files)
        if failed:
            raise click.ClickException(f"{failed} catalog file(s) failed validation")
        return 0

    settings = load_settings()
    stores = [*build_stores(settings), *(FileMessageStore(path) for path in catalog_files)]
    registry = MessageRegistry(
        *stores,
        include_defaults=not no_defaults,
        warning_status_code=settings.warning_status_code,
        load_timeout=settings.store_load_timeout,
    )
    for failure in registry.merge_failures:
        click.secho(f"Skipped {failure.store}: {failure.message}", fg="yellow", err=True)

    match action:
        case "list":
            codes = registry.get_all_codes()
            for code in codes:
                click.echo(code)
            return codes
        case "stats":
            stats = catalog_stats(registry)
            ic(stats)
            return stats
        case _:
            raise click.ClickException(f"Invalid action: {action}. Valid actions are: list, stats, validate")


if __name__ == "__main__":
    main()
