import click

from zpaper import __version__
from zpaper.cli.paper import encode_command, decode_command


@click.group()
@click.version_option(__version__, prog_name="zpaper")
def cli():
    """Prints binary data as checksummed text lines and reads it back."""
    pass


cli.add_command(encode_command)
cli.add_command(decode_command)


if __name__ == "__main__":
    cli()
