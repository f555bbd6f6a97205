import click

from .commands.escape import escape_command
from .commands.render import render_command


@click.group()
def app() -> None:
    pass


app.add_command(render_command, name="render")
app.add_command(escape_command, name="escape")
__all__ = ["app"]
