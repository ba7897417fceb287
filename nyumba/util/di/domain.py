"""Domain layer DI providers."""

from dishka import Scope, provide

from nyumba.config import AuthSettings, MentorshipSettings, MessagingSettings
from nyumba.domain.repository import (
    AccountRepository,
    MentorshipRepository,
    MentorshipRequestRepository,
    MessageRepository,
    RateLimitRepository,
    TransactionManager,
)
from nyumba.domain.service import (
    AccountService,
    JWTService,
    MentorshipRequestService,
    MentorshipService,
    MessageService,
    RateLimitService,
)
from nyumba.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self, account_repository: AccountRepository
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(account_repository=account_repository)

    @provide
    def get_rate_limit_service(
        self, rate_limit_repository: RateLimitRepository
    ) -> RateLimitService:
        """Provide rate limit domain service."""
        return RateLimitService(rate_limit_repository=rate_limit_repository)

    @provide
    def get_mentorship_service(
        self, mentorship_repository: MentorshipRepository
    ) -> MentorshipService:
        """Provide mentorship domain service."""
        return MentorshipService(mentorship_repository=mentorship_repository)

    @provide
    def get_mentorship_request_service(
        self,
        request_repository: MentorshipRequestRepository,
        account_service: AccountService,
        mentorship_service: MentorshipService,
        rate_limit_service: RateLimitService,
        transaction_manager: TransactionManager,
        mentorship_settings: MentorshipSettings,
    ) -> MentorshipRequestService:
        """Provide mentorship request domain service."""
        return MentorshipRequestService(
            request_repository=request_repository,
            account_service=account_service,
            mentorship_service=mentorship_service,
            rate_limit_service=rate_limit_service,
            transaction_manager=transaction_manager,
            mentorship_settings=mentorship_settings,
        )

    @provide
    def get_message_service(
        self,
        message_repository: MessageRepository,
        mentorship_service: MentorshipService,
        rate_limit_service: RateLimitService,
        messaging_settings: MessagingSettings,
    ) -> MessageService:
        """Provide message domain service."""
        return MessageService(
            message_repository=message_repository,
            mentorship_service=mentorship_service,
            rate_limit_service=rate_limit_service,
            messaging_settings=messaging_settings,
        )
