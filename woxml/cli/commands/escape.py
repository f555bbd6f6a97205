import click

from ...domain.services.escaper import escape


@click.command()
@click.argument("text")
def escape_command(text: str) -> None:
    """Print TEXT with the five predefined XML entities escaped."""
    click.echo(escape(text))
