"""Policy models — limits, check identities, per-check outcomes, and verdicts.

Every evaluation is a pure function of (candidate, PolicyLimits): same input → same verdict.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from pwcheck.validators.reference_data import (
    ALLOWED_DUPLICATE_LETTERS,
    APPROVED_LETTERS,
    CONSECUTIVE_CHARACTER_LIMIT,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)


class CheckName(str, Enum):
    """Identity of each policy check, in fast-fail evaluation order."""

    LENGTH = "length"
    APPROVED_CHARACTERS = "approved_characters"
    VOWEL_PRESENT = "vowel_present"
    NO_DISALLOWED_REPEAT = "no_disallowed_repeat"
    NO_FORBIDDEN_RUN = "no_forbidden_run"


class PolicyLimits(BaseModel):
    """Fixed rule parameters shared by every validator.

    Constructed once at startup and read-only afterwards.
    """

    min_length: int = Field(default=PASSWORD_MIN_LENGTH, ge=0)
    max_length: int = Field(default=PASSWORD_MAX_LENGTH, ge=0)
    consecutive_limit: int = Field(
        default=CONSECUTIVE_CHARACTER_LIMIT,
        ge=1,
        description="Run length of vowels or consonants that rejects a candidate",
    )
    exempt_duplicates: frozenset[str] = Field(
        default=ALLOWED_DUPLICATE_LETTERS,
        description="Letters allowed to appear twice in a row",
    )

    model_config = {"frozen": True}

    @field_validator("exempt_duplicates")
    @classmethod
    def _exempt_letters_are_approved(cls, value: frozenset[str]) -> frozenset[str]:
        bad = sorted(letter for letter in value if letter not in APPROVED_LETTERS)
        if bad:
            raise ValueError(f"exempt duplicates must be single lowercase letters, got {bad}")
        return value

    @model_validator(mode="after")
    def _min_not_above_max(self) -> "PolicyLimits":
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            )
        return self


DEFAULT_LIMITS = PolicyLimits()


class CheckOutcome(BaseModel):
    """Result of one check. ``passed`` is True when the check allows acceptance."""

    check: CheckName
    passed: bool

    model_config = {"frozen": True}


class Verdict(BaseModel):
    """Accept/reject decision for one candidate."""

    candidate: str
    accepted: bool
    outcomes: Optional[list[CheckOutcome]] = Field(
        default=None,
        description="Every check outcome; only populated in full-diagnostic mode",
    )

    model_config = {"frozen": True}

    @property
    def failed_checks(self) -> list[CheckName]:
        if not self.outcomes:
            return []
        return [o.check for o in self.outcomes if not o.passed]

    @classmethod
    def build(cls, candidate: str, outcomes: list[CheckOutcome]) -> "Verdict":
        """Combine every outcome with logical AND and keep them for reporting."""
        return cls(
            candidate=candidate,
            accepted=all(o.passed for o in outcomes),
            outcomes=list(outcomes),
        )
