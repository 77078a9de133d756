"""pwcheck — batch password policy validator.

Command-line entry point: structured logging setup, file handling, and the
batch run. The rule engine itself lives in pwcheck.validators.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import structlog

from pwcheck import __version__
from pwcheck.config import Settings, get_settings
from pwcheck.exceptions import PwcheckError
from pwcheck.services.batch import run_batch
from pwcheck.services.input_provider import InputProvider
from pwcheck.services.result_reporter import ResultReporter
from pwcheck.validators import policy_evaluator

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Configure structured logging to stderr; the results file stays clean."""
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--in-file",
    "--inFile",
    "in_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File containing passwords to test, one per line",
)
@click.option(
    "--out-file",
    "--outFile",
    "out_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File to store results",
)
@click.option(
    "--diagnostic",
    is_flag=True,
    help="Run every check for every password and report each outcome",
)
@click.option(
    "--list-checks",
    "list_checks_flag",
    is_flag=True,
    help="List the policy checks in evaluation order and exit",
)
def main(
    in_file: Optional[Path],
    out_file: Optional[Path],
    diagnostic: bool,
    list_checks_flag: bool,
):
    """
    pwcheck - Validate passwords against the lowercase password policy.

    Reads one password per line until a line reading "end", and writes
    "<password> is acceptable." or "<password> is not acceptable." for each.

    Examples:

        # Check a file of passwords
        pwcheck --in-file passwords.txt --out-file results.txt

        # Include every check outcome in the results
        pwcheck --in-file passwords.txt --out-file results.txt --diagnostic
    """
    if list_checks_flag:
        _print_checks()
        return

    settings = get_settings()
    configure_logging(settings)

    # Missing file names is fatal before anything is opened
    if in_file is None or out_file is None:
        raise click.UsageError("Missing command-line arguments: --in-file and --out-file are required")

    diagnostic = diagnostic or settings.DIAGNOSTIC_MODE

    try:
        provider = InputProvider.open(in_file)
    except PwcheckError as e:
        logger.error("input_open_failed", path=str(in_file), error=str(e))
        raise click.ClickException(str(e)) from e

    with provider:
        try:
            reporter = ResultReporter.create(out_file)
        except PwcheckError as e:
            logger.error("output_create_failed", path=str(out_file), error=str(e))
            raise click.ClickException(str(e)) from e

        with reporter:
            summary = run_batch(provider, policy_evaluator, reporter, diagnostic=diagnostic)

    click.echo(f"Execution time: {summary.duration_ms:.3f}ms", err=True)
    if not summary.sentinel_found:
        click.echo(
            f"End of input keyword ({provider.sentinel}) not found before EOF",
            err=True,
        )


def _print_checks():
    """Print the policy checks and limits."""
    limits = policy_evaluator.limits

    click.echo("Policy checks (evaluation order):\n")
    for index, check in enumerate(policy_evaluator.check_names(), start=1):
        click.echo(f"  {index}. {check.value}")
    click.echo()
    click.echo(f"  length:             {limits.min_length}-{limits.max_length}")
    click.echo(f"  run limit:          {limits.consecutive_limit}")
    click.echo(f"  exempt duplicates:  {', '.join(sorted(limits.exempt_duplicates))}")


if __name__ == "__main__":
    main()
