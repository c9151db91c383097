"""logmeta CLI: inspect the resource descriptor for the current environment."""

import click

from logmeta import __version__


@click.group()
@click.version_option(version=__version__, package_name="logmeta")
def main() -> None:
    """logmeta: Cloud Logging resource detection."""


from .detect_cmd import detect  # noqa: E402

main.add_command(detect)
