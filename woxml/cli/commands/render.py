"""Render command - replay a JSON write script through the XML writer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, cast

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape as escape_markup

from ...application.models import WriteScript
from ...application.replay import replay_script
from ...config import ConfigLoader
from ...domain.entities.output import OutputMode
from ...domain.exceptions import XmlWriterError
from ...domain.services.xml_writer import XmlWriter
from ...infrastructure.io.sinks import StreamSink
from ..logging_config import create_logger

if TYPE_CHECKING:
    from ...infrastructure.logging.console_logger import ConsoleLogger


@dataclass(frozen=True, slots=True)
class RenderCommandOptions:
    config_file: Path | None
    output: Path | None
    mode: str | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> RenderCommandOptions:
        return cls(
            config_file=cast("Path | None", options.get("config_file")),
            output=cast("Path | None", options.get("output")),
            mode=cast("str | None", options.get("mode")),
            verbose=cast("int", options["verbose"]),
        )


@click.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a woxml.toml config file (default: ./woxml.toml)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the XML to this file instead of stdout",
)
@click.option(
    "--pretty",
    "mode",
    flag_value=OutputMode.PRETTY.value,
    help="Indent nested elements (overrides the script and config)",
)
@click.option(
    "--compact",
    "mode",
    flag_value=OutputMode.COMPACT.value,
    help="Emit no whitespace between nodes (overrides the script and config)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def render_command(script: Path, **options: object) -> None:
    """Replay a JSON write script and emit the resulting XML.

    The script lists writer calls in order:

    \b
        {"mode": "pretty",
         "operations": [
             {"op": "begin_elem", "args": ["root"]},
             {"op": "attr_esc", "args": ["id", "1"]},
             {"op": "text_esc", "args": ["hi"]},
             {"op": "end_elem"}]}

    Any element still open at the end of the script is closed.
    """
    command_options = RenderCommandOptions.from_kwargs(dict(options))
    config = ConfigLoader.load(config_file=command_options.config_file)
    logger = create_logger(
        Console(stderr=True), max(command_options.verbose, config.verbosity)
    )
    logger.set_context(document=script.name)

    try:
        write_script = WriteScript.model_validate_json(script.read_text(encoding="utf-8"))
    except ValidationError as e:
        logger.error(
            f"Invalid write script {escape_markup(str(script))}: "
            f"{e.error_count()} error(s)"
        )
        for detail in e.errors():
            location = ".".join(str(part) for part in detail["loc"])
            logger.verbose(escape_markup(f"  {location}: {detail['msg']}"))
        raise click.ClickException(f"Invalid write script: {script}") from e

    mode = config.mode
    if command_options.mode is not None:
        mode = OutputMode.parse(command_options.mode)
    elif write_script.mode is not None:
        mode = write_script.mode

    if command_options.output is None:
        _render(write_script, mode, StreamSink(click.get_binary_stream("stdout")), logger)
        click.echo()
    else:
        command_options.output.parent.mkdir(parents=True, exist_ok=True)
        with command_options.output.open("wb") as handle:
            written = _render(write_script, mode, StreamSink(handle), logger)
        logger.success(
            f"Wrote {written:,} bytes to {escape_markup(str(command_options.output))}"
        )
    logger.log_final_stats()


def _render(
    write_script: WriteScript,
    mode: OutputMode,
    sink: StreamSink,
    logger: ConsoleLogger,
) -> int:
    writer = XmlWriter(sink, mode, logger=logger)
    try:
        count = replay_script(writer, write_script)
        writer.flush()
    except XmlWriterError as e:
        logger.error(f"Write script rejected: {escape_markup(str(e))}")
        raise click.ClickException(str(e)) from e
    logger.verbose(f"Applied {count} operation(s)")
    return writer.bytes_written
