"""
Command-line entry point for ipprefix.
"""

from dataclasses import replace

import click

from ipprefix import __version__
from ipprefix.config import get_config, set_config
from ipprefix.logging_config import configure_logging
from ipprefix.prefix.cli import prefix


@click.group()
@click.version_option(__version__, prog_name="ipprefix")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", is_flag=True, help="Also log to ~/.ipprefix/logs/ipprefix.log")
@click.option("--no-details", is_flag=True, help="Report only error kinds, without messages")
def main(debug: bool, log_file: bool, no_details: bool):
    """IP prefix (CIDR) arithmetic utilities."""
    config = get_config()
    if no_details:
        config = replace(config, skip_error_details=True)
        set_config(config)

    try:
        configure_logging(
            level=config.log_level,
            debug=debug,
            log_to_file=log_file or config.log_to_file,
            log_dir=config.log_dir,
        )
    except ValueError as e:
        raise click.UsageError(f"IPPREFIX_LOG_LEVEL: {e}")


main.add_command(prefix)


if __name__ == "__main__":
    main()
