"""Data transfer objects for registration admission."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from user_admission.domain.entities import CandidateUser


@dataclass(frozen=True)
class RegistrationRequest:
    """Input data for a single admission attempt."""
    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    client_id: int


class AdmissionOutcome(str, Enum):
    """Final state of an admission attempt."""
    ADMITTED = "admitted"
    REJECTED = "rejected"


class RejectionReason(str, Enum):
    """Why a registration was rejected by policy."""
    INVALID_INPUT = "invalid_input"
    TOO_YOUNG = "too_young"
    INSUFFICIENT_CREDIT_LIMIT = "insufficient_credit_limit"


@dataclass(frozen=True)
class AdmissionResult:
    """
    Result of a policy decision on a registration.

    Data-integrity failures (unknown client, unknown tier, missing
    credit record) are raised as exceptions and never end up here.
    """

    outcome: AdmissionOutcome
    reason: Optional[RejectionReason] = None
    user: Optional[CandidateUser] = None

    @property
    def admitted(self) -> bool:
        return self.outcome == AdmissionOutcome.ADMITTED

    @classmethod
    def accept(cls, user: CandidateUser) -> "AdmissionResult":
        return cls(outcome=AdmissionOutcome.ADMITTED, user=user)

    @classmethod
    def reject(
        cls,
        reason: RejectionReason,
        user: Optional[CandidateUser] = None,
    ) -> "AdmissionResult":
        return cls(outcome=AdmissionOutcome.REJECTED, reason=reason, user=user)
