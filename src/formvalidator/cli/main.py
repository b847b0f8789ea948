"""formvalidator CLI entry point."""

import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool):
    """formvalidator — declarative form validation CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from formvalidator.cli.form_cmd import check, validate_definition, validators  # noqa: E402

cli.add_command(check)
cli.add_command(validate_definition)
cli.add_command(validators)
