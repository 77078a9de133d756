"""Batch runner — reads, evaluates, and reports candidates one at a time."""

import time

import structlog
from pydantic import BaseModel, Field

from pwcheck.services.input_provider import InputProvider
from pwcheck.services.result_reporter import ResultReporter
from pwcheck.validators.engine import PolicyEvaluator

logger = structlog.get_logger()


class BatchSummary(BaseModel):
    """Counts and timing for one pass over the input."""

    evaluated: int = 0
    accepted: int = 0
    rejected: int = 0
    write_failures: int = 0
    sentinel_found: bool = False
    duration_ms: float = Field(default=0.0, description="Wall time of the evaluation loop")


def run_batch(
    provider: InputProvider,
    evaluator: PolicyEvaluator,
    reporter: ResultReporter,
    diagnostic: bool = False,
) -> BatchSummary:
    """Evaluate every candidate from the provider and report each verdict in order.

    Each verdict is written before the next line is read. Stops at the
    sentinel or at end of input.

    Args:
        provider: Source of candidate lines
        evaluator: Policy to apply
        reporter: Sink for verdict lines
        diagnostic: Use full-diagnostic mode and report every check outcome

    Returns:
        BatchSummary for the run
    """
    summary = BatchSummary()
    logger.info("batch_started", diagnostic=diagnostic)

    start_time = time.perf_counter()

    for candidate in provider:
        verdict = evaluator.evaluate(candidate, collect_all=diagnostic)
        summary.evaluated += 1
        if verdict.accepted:
            summary.accepted += 1
        else:
            summary.rejected += 1

        reporter.report(verdict)

    summary.duration_ms = round((time.perf_counter() - start_time) * 1000, 3)
    summary.sentinel_found = provider.sentinel_found
    summary.write_failures = reporter.write_failures

    logger.info(
        "batch_complete",
        evaluated=summary.evaluated,
        accepted=summary.accepted,
        rejected=summary.rejected,
        write_failures=summary.write_failures,
        duration_ms=summary.duration_ms,
    )

    if not summary.sentinel_found:
        logger.warning(
            "end_of_input_not_found",
            sentinel=provider.sentinel,
            lines_read=provider.lines_read,
        )

    return summary
