"""Policy Evaluator — runs the ordered validator chain and produces a Verdict.

One ordered list of checks backs both evaluation modes:

    fast-fail        stop at the first failing check, verdict only
    full-diagnostic  run every check, verdict plus every CheckOutcome

Both modes combine the checks with the same AND formula, so they always agree
on the final accept/reject decision.

Usage:
    evaluator = PolicyEvaluator()
    if evaluator.is_acceptable("banana"):
        ...
    verdict = evaluator.diagnose("rhythm")
    verdict.failed_checks  # [CheckName.VOWEL_PRESENT, CheckName.NO_FORBIDDEN_RUN]
"""

from typing import Optional

import structlog

from pwcheck.validators.base import BaseValidator
from pwcheck.validators.models import DEFAULT_LIMITS, CheckName, CheckOutcome, PolicyLimits, Verdict

from pwcheck.validators.length_validator import LengthValidator
from pwcheck.validators.character_set_validator import CharacterSetValidator
from pwcheck.validators.vowel_validator import VowelPresenceValidator
from pwcheck.validators.duplicate_letter_validator import DuplicateLetterValidator
from pwcheck.validators.run_validator import RunValidator

logger = structlog.get_logger()


class PolicyEvaluator:
    """Composes the policy validators into one accept/reject decision.

    Holds no per-candidate state: the limits and compiled matchers are
    read-only after construction, so one instance can serve any number of
    evaluations.
    """

    def __init__(
        self,
        limits: Optional[PolicyLimits] = None,
        validators: Optional[list[BaseValidator]] = None,
    ):
        """Initialize with the default validator chain or a custom list.

        Args:
            limits: Policy limits for the default chain. Defaults to DEFAULT_LIMITS.
            validators: Optional explicit chain, evaluated in list order.
        """
        self.limits = limits or DEFAULT_LIMITS
        self.validators = (
            validators if validators is not None else self._default_validators(self.limits)
        )

    @staticmethod
    def _default_validators(limits: PolicyLimits) -> list[BaseValidator]:
        """Create the default validator chain in fast-fail order."""
        return [
            LengthValidator(limits),           # Cheapest, rejects empty and oversized input
            CharacterSetValidator(limits),     # Everything below assumes a-z only
            VowelPresenceValidator(limits),
            DuplicateLetterValidator(limits),
            RunValidator(limits),
        ]

    def evaluate(self, candidate: str, collect_all: bool = False) -> Verdict:
        """Evaluate one candidate against every check.

        Args:
            candidate: Password text, already stripped of its line terminator
            collect_all: Run every check and keep each outcome (full-diagnostic
                mode) instead of stopping at the first failure

        Returns:
            Verdict; ``outcomes`` is populated only when collect_all is set
        """
        if collect_all:
            outcomes: list[CheckOutcome] = [v.evaluate(candidate) for v in self.validators]
            verdict = Verdict.build(candidate, outcomes)
            if not verdict.accepted:
                logger.debug(
                    "candidate_rejected",
                    length=len(candidate),
                    validators=[v.name for v, o in zip(self.validators, outcomes) if not o.passed],
                    failed_checks=[c.value for c in verdict.failed_checks],
                )
            return verdict

        for validator in self.validators:
            if not validator.passes(candidate):
                logger.debug(
                    "candidate_rejected",
                    length=len(candidate),
                    validator=validator.name,
                    failed_check=validator.check.value,
                )
                return Verdict(candidate=candidate, accepted=False)

        return Verdict(candidate=candidate, accepted=True)

    def is_acceptable(self, candidate: str) -> bool:
        """Fast-fail evaluation: True only if every check passes."""
        return self.evaluate(candidate).accepted

    def diagnose(self, candidate: str) -> Verdict:
        """Full-diagnostic evaluation with every CheckOutcome attached."""
        return self.evaluate(candidate, collect_all=True)

    def check_names(self) -> list[CheckName]:
        """Checks in evaluation order."""
        return [v.check for v in self.validators]


# Module-level default instance
policy_evaluator = PolicyEvaluator()
