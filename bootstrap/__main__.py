"""Bootstrap entry point."""

import sys

import click
from pydantic import ValidationError

from bootstrap import ui
from bootstrap.cli import cli

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def describe_validation_error(error: ValidationError) -> str:
    """Summarize a settings validation failure on a single line."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or error.title
    summary = f"{location}: {first['msg']}"
    if error.error_count() > 1:
        summary += f" (and {error.error_count() - 1} more)"
    return summary


def main():
    """Main entry point."""
    try:
        exit_code = cli.main(standalone_mode=False)
    except (KeyboardInterrupt, click.exceptions.Abort):
        # Exit cleanly without showing traceback
        sys.exit(EXIT_INTERRUPTED)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except ValidationError as e:
        ui.error(f"Error: invalid configuration: {describe_validation_error(e)}")
        sys.exit(EXIT_FAILURE)
    sys.exit(exit_code or 0)


if __name__ == "__main__":
    main()
