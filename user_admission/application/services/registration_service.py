"""Registration service - orchestrates the user admission use case."""

from datetime import date, datetime
from typing import Callable, Optional

import structlog

from user_admission.core.metrics import (
    record_admission,
    record_admission_failure,
    record_credit_limit,
    track_admission_latency,
)
from user_admission.domain.entities import CandidateUser, Client
from user_admission.domain.exceptions import DomainException
from user_admission.domain.interfaces import (
    ClientDirectory,
    CreditScoreProvider,
    UserStore,
)
from user_admission.application.dto import (
    AdmissionResult,
    RegistrationRequest,
    RejectionReason,
)
from user_admission.service.admission import (
    AdmissionSettings,
    CreditLimitStrategyFactory,
    admission_settings,
    get_credit_limit_bucket,
    is_invalid,
    is_too_young,
    resolve_client_type,
)

logger = structlog.get_logger(__name__)


class RegistrationService:
    """
    Application service for admitting new users.

    A registration is admitted when its fields are valid, the user is old
    enough and, for tiers with an enforced credit limit, the limit reaches
    the configured minimum. Policy rejections are returned; lookup failures
    are raised to the caller.
    """

    def __init__(
        self,
        client_directory: ClientDirectory,
        credit_score_provider: CreditScoreProvider,
        user_store: UserStore,
        settings: Optional[AdmissionSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._client_directory = client_directory
        self._user_store = user_store
        self._settings = settings or admission_settings
        self._clock = clock or datetime.now
        self._strategy_factory = CreditLimitStrategyFactory(
            credit_score_provider, self._settings
        )

    def add_user(
        self,
        first_name: str,
        last_name: str,
        email: str,
        date_of_birth: date,
        client_id: int,
    ) -> bool:
        """
        Try to admit a new user.

        Returns:
            True if the user was admitted and persisted, False if rejected

        Raises:
            ClientNotFoundException: If the client doesn't exist
            InvalidClientTypeException: If the client's tier is not recognized
            ClientCreditUnavailableException: If the credit lookup fails
        """
        request = RegistrationRequest(
            first_name=first_name,
            last_name=last_name,
            email=email,
            date_of_birth=date_of_birth,
            client_id=client_id,
        )
        return self.admit(request).admitted

    def admit(self, request: RegistrationRequest) -> AdmissionResult:
        """
        Process a registration request.

        Args:
            request: The registration to evaluate

        Returns:
            AdmissionResult with the outcome and, once built, the user

        Raises:
            ClientNotFoundException: If the client doesn't exist
            InvalidClientTypeException: If the client's tier is not recognized
            ClientCreditUnavailableException: If the credit lookup fails
        """
        log = logger.bind(client_id=request.client_id)
        log.info("admission_requested")

        with track_admission_latency():
            try:
                result = self._admit(request, log)
            except DomainException as e:
                record_admission_failure(e.code)
                log.warning(
                    "admission_failed",
                    error=e.code,
                    message=e.message,
                )
                raise

        record_admission(
            result.admitted,
            result.reason.value if result.reason else None,
        )
        return result

    def _admit(self, request: RegistrationRequest, log) -> AdmissionResult:
        rejection = self._check_request(request)
        if rejection is not None:
            log.info("admission_rejected", reason=rejection.value)
            return AdmissionResult.reject(rejection)

        client = self._client_directory.get_by_id(request.client_id)
        log.info("client_resolved", client_type=client.type)

        user = self._make_user(request, client)
        log.info(
            "credit_limit_calculated",
            has_credit_limit=user.has_credit_limit,
            credit_limit=user.credit_limit,
        )

        if self._has_insufficient_credit_limit(user):
            log.info(
                "admission_rejected",
                reason=RejectionReason.INSUFFICIENT_CREDIT_LIMIT.value,
                minimum_credit_limit=self._settings.minimum_credit_limit,
            )
            return AdmissionResult.reject(
                RejectionReason.INSUFFICIENT_CREDIT_LIMIT, user=user
            )

        # Persist last, after every check has passed
        self._user_store.add_user(user)
        log.info("user_admitted", user_id=str(user.id))

        return AdmissionResult.accept(user)

    def _check_request(
        self, request: RegistrationRequest
    ) -> Optional[RejectionReason]:
        """Run the checks that need no collaborators."""
        if is_invalid(request.first_name, request.last_name, request.email):
            return RejectionReason.INVALID_INPUT

        if is_too_young(request.date_of_birth, self._clock(), self._settings):
            return RejectionReason.TOO_YOUNG

        return None

    def _has_insufficient_credit_limit(self, user: CandidateUser) -> bool:
        return (
            user.has_credit_limit
            and user.credit_limit < self._settings.minimum_credit_limit
        )

    def _make_user(
        self, request: RegistrationRequest, client: Client
    ) -> CandidateUser:
        """
        Build the candidate user and apply the client's credit limit policy.

        The strategy is selected before the user is built so an unknown
        tier fails without any credit lookup.
        """
        strategy = self._strategy_factory.strategy_for(client)

        user = CandidateUser(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            date_of_birth=request.date_of_birth,
            client=client,
        )
        user.has_credit_limit = strategy.has_credit_limit()
        user.credit_limit = strategy.calculate_credit_limit(user)

        record_credit_limit(
            get_credit_limit_bucket(user.credit_limit),
            resolve_client_type(client.type).value,
        )
        return user
