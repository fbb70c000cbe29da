import click
from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from zpaper.lib.paperbase import (
    encode,
    decode_text,
    split_trailer,
    payload_digest,
    PaperCodecError,
)

# Diagnostics go to stderr so stdout stays clean for piped output
console = Console(stderr=True, highlight=False)


def _write_output(data: bytes, output: Optional[str]):
    if output:
        with open(output, "wb") as f:
            f.write(data)
    else:
        stream = click.get_binary_stream("stdout")
        stream.write(data)
        stream.flush()


def _show_offending_line(text: str, error: PaperCodecError):
    """Print the line a decode error points at, for comparison with the scan."""
    line_number = getattr(error, "line_number", None)
    lines = text.splitlines()
    if line_number is None or not 0 < line_number <= len(lines):
        return

    body = Text(lines[line_number - 1].strip())
    column = getattr(error, "column", None)
    if column is not None and 0 < column <= len(body):
        body.stylize("bold reverse red", column - 1, column)

    console.print(
        Panel(
            body,
            title=f"line {line_number}",
            subtitle="compare with the printout, correct, and decode again",
            border_style="red",
            expand=False,
        )
    )


@click.command("encode")
@click.argument("input", type=click.File("rb"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Output file. If not specified, writes to stdout.",
)
@click.option(
    "--hint",
    "hints",
    multiple=True,
    help="Free-text note to append to the trailer. May be repeated.",
)
@click.option("--no-trailer", is_flag=True, help="Omit the length/digest trailer.")
def encode_command(input, output, hints, no_trailer):
    """Encodes binary INPUT (default stdin) as printable lines."""
    payload = input.read()
    try:
        text = encode(payload, hints=hints, trailer=not no_trailer)
    except ValueError as e:
        raise click.ClickException(str(e))
    _write_output(text.encode("ascii"), output)

    click.echo(f"# length: {len(payload)}", err=True)
    click.echo(f"# sha256: {payload_digest(payload)}", err=True)


@click.command("decode")
@click.argument("input", type=click.File("rb"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Output file. If not specified, writes to stdout.",
)
@click.option(
    "--length",
    type=click.IntRange(min=0),
    help="Original payload length. Overrides the trailer, which is then ignored.",
)
def decode_command(input, output, length):
    """Decodes printed lines from INPUT (default stdin) back into bytes."""
    raw = input.read()
    try:
        text = raw.decode("ascii")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Input is not ASCII text: {e}")

    decode_input = text
    if length is not None:
        numbered = list(enumerate(text.splitlines(), start=1))
        data_lines, _ = split_trailer(
            (number, line.strip()) for number, line in numbered
        )
        # Blank out trailer lines so reported line numbers still match the input
        kept = {number for number, _ in data_lines}
        decode_input = "\n".join(
            line if number in kept else "" for number, line in numbered
        )

    try:
        result = decode_text(decode_input, length)
    except PaperCodecError as e:
        _show_offending_line(text, e)
        raise click.ClickException(str(e))

    _write_output(result.payload, output)

    for warning in result.warnings:
        console.print(f"[yellow]warning:[/yellow] {warning}")

    click.echo(f"# length: {result.length}", err=True)
    click.echo(f"# sha256: {result.digest}", err=True)
