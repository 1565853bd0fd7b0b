"""Data Transfer Objects for application layer."""

from .registration import (
    RegistrationRequest,
    AdmissionOutcome,
    RejectionReason,
    AdmissionResult,
)

__all__ = [
    "RegistrationRequest",
    "AdmissionOutcome",
    "RejectionReason",
    "AdmissionResult",
]
