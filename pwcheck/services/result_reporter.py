"""Result reporter — persists one verdict line per evaluated candidate.

A failure to write one verdict is logged and counted; it never aborts the
rest of the batch.
"""

from pathlib import Path
from typing import TextIO

import structlog

from pwcheck.exceptions import OutputSinkError
from pwcheck.validators.models import Verdict
from pwcheck.validators.reference_data import (
    ACCEPTABLE_TEMPLATE,
    DIAGNOSTIC_TEMPLATE,
    NOT_ACCEPTABLE_TEMPLATE,
)

logger = structlog.get_logger()


def format_result(candidate: str, accepted: bool) -> str:
    """Render the verdict line, e.g. ``<banana> is acceptable.\\r\\n``."""
    template = ACCEPTABLE_TEMPLATE if accepted else NOT_ACCEPTABLE_TEMPLATE
    return template.format(candidate=candidate)


def format_diagnostics(verdict: Verdict) -> str:
    """Render every check outcome, e.g. ``<tv> checks: length=pass vowel_present=fail ...``."""
    outcomes = " ".join(
        f"{o.check.value}={'pass' if o.passed else 'fail'}" for o in verdict.outcomes or []
    )
    return DIAGNOSTIC_TEMPLATE.format(candidate=verdict.candidate, outcomes=outcomes)


class ResultReporter:
    """Writes verdict lines to a text sink in evaluation order."""

    def __init__(self, sink: TextIO):
        self.sink = sink
        self.written = 0
        self.write_failures = 0

    @classmethod
    def create(cls, path: Path) -> "ResultReporter":
        """Create (or truncate) the results file.

        Raises:
            OutputSinkError: the file cannot be created
        """
        try:
            # newline="" so the "\r\n" terminators are written verbatim
            sink = open(path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise OutputSinkError(f"Cannot create output file '{path}': {e.strerror or e}") from e
        return cls(sink)

    def report(self, verdict: Verdict) -> bool:
        """Write the verdict line, plus a diagnostics line when outcomes are attached.

        Returns:
            True if everything was written, False if the write failed
        """
        text = format_result(verdict.candidate, verdict.accepted)
        if verdict.outcomes is not None:
            text += format_diagnostics(verdict)

        try:
            self.sink.write(text)
        except (OSError, ValueError) as e:
            # ValueError: write to a closed file
            self.write_failures += 1
            logger.error(
                "result_write_failed",
                line=self.written + self.write_failures,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        self.written += 1
        return True

    def close(self) -> None:
        self.sink.close()

    def __enter__(self) -> "ResultReporter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
