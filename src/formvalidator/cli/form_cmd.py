"""Form CLI commands — check values, validate definitions, list validators."""

from pathlib import Path

import click

from formvalidator.config.loader import load_form_definition, load_values
from formvalidator.config.schema import validate_form_file
from formvalidator.validation.engine import ValidationEngine
from formvalidator.validation.registry import default_registry
from formvalidator.validation.types import FormValidatorError


@click.command()
@click.argument("form_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("values_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--locale", default=None, help="Locale for error messages (default: the form's, else en).")
def check(form_path: Path, values_path: Path, locale: str | None):
    """Validate the values in VALUES_PATH against the form in FORM_PATH."""
    try:
        definition = load_form_definition(form_path)
        values = load_values(values_path)
        config = definition.build_fields(default_registry().snapshot())
        result = ValidationEngine(definition.settings()).evaluate(config, values, locale)
    except FormValidatorError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(2)

    if result.valid:
        click.echo(click.style(f"Form '{definition.name}' is valid.", fg="green", bold=True))
        return

    for name, message in result.errors.items():
        click.echo(click.style(f"  ✗ {name}: {message}", fg="red"))
    click.echo(
        click.style(f"\n{len(result.errors)} invalid field(s)", fg="red", bold=True)
    )
    raise SystemExit(1)


@click.command("validate-definition")
@click.argument("form_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate_definition(form_path: Path):
    """Validate a form definition YAML file against the form schema."""
    issues = validate_form_file(form_path)
    for issue in issues:
        click.echo(click.style(str(issue), fg="red"))

    if issues:
        click.echo(click.style(f"\n{len(issues)} schema error(s) found", fg="red", bold=True))
        raise SystemExit(1)

    click.echo(click.style("Form definition is valid.", fg="green", bold=True))


@click.command()
def validators():
    """List registered validator names."""
    for name in default_registry().list_registered():
        click.echo(name)
