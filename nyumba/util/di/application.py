"""Application layer DI providers."""

from dishka import Scope, provide

from nyumba.application.usecase.mentorship import (
    ListMentorshipsUseCase,
    SetMentorshipActiveUseCase,
)
from nyumba.application.usecase.mentorship_request import (
    CreateMentorshipRequestUseCase,
    GetMentorshipRequestUseCase,
    ListMentorshipRequestsUseCase,
    RespondToRequestUseCase,
)
from nyumba.application.usecase.message import (
    CountUnreadUseCase,
    FetchNewMessagesUseCase,
    ListConversationsUseCase,
    ListThreadUseCase,
    SendMessageUseCase,
)
from nyumba.domain.service import (
    MentorshipRequestService,
    MentorshipService,
    MessageService,
)
from nyumba.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Mentorship request use cases
    @provide(scope=Scope.REQUEST)
    def get_create_mentorship_request_use_case(
        self, mentorship_request_service: MentorshipRequestService
    ) -> CreateMentorshipRequestUseCase:
        """Provide create mentorship request use case."""
        return CreateMentorshipRequestUseCase(
            mentorship_request_service=mentorship_request_service
        )

    @provide(scope=Scope.REQUEST)
    def get_respond_to_request_use_case(
        self, mentorship_request_service: MentorshipRequestService
    ) -> RespondToRequestUseCase:
        """Provide respond to request use case."""
        return RespondToRequestUseCase(
            mentorship_request_service=mentorship_request_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_mentorship_requests_use_case(
        self, mentorship_request_service: MentorshipRequestService
    ) -> ListMentorshipRequestsUseCase:
        """Provide list mentorship requests use case."""
        return ListMentorshipRequestsUseCase(
            mentorship_request_service=mentorship_request_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_mentorship_request_use_case(
        self, mentorship_request_service: MentorshipRequestService
    ) -> GetMentorshipRequestUseCase:
        """Provide get mentorship request use case."""
        return GetMentorshipRequestUseCase(
            mentorship_request_service=mentorship_request_service
        )

    # Mentorship use cases
    @provide(scope=Scope.REQUEST)
    def get_set_mentorship_active_use_case(
        self, mentorship_service: MentorshipService
    ) -> SetMentorshipActiveUseCase:
        """Provide set mentorship active use case."""
        return SetMentorshipActiveUseCase(mentorship_service=mentorship_service)

    @provide(scope=Scope.REQUEST)
    def get_list_mentorships_use_case(
        self, mentorship_service: MentorshipService
    ) -> ListMentorshipsUseCase:
        """Provide list mentorships use case."""
        return ListMentorshipsUseCase(mentorship_service=mentorship_service)

    # Message use cases
    @provide(scope=Scope.REQUEST)
    def get_send_message_use_case(
        self, message_service: MessageService
    ) -> SendMessageUseCase:
        """Provide send message use case."""
        return SendMessageUseCase(message_service=message_service)

    @provide(scope=Scope.REQUEST)
    def get_list_thread_use_case(
        self, message_service: MessageService
    ) -> ListThreadUseCase:
        """Provide list thread use case."""
        return ListThreadUseCase(message_service=message_service)

    @provide(scope=Scope.REQUEST)
    def get_fetch_new_messages_use_case(
        self, message_service: MessageService
    ) -> FetchNewMessagesUseCase:
        """Provide fetch new messages use case."""
        return FetchNewMessagesUseCase(message_service=message_service)

    @provide(scope=Scope.REQUEST)
    def get_count_unread_use_case(
        self, message_service: MessageService
    ) -> CountUnreadUseCase:
        """Provide count unread use case."""
        return CountUnreadUseCase(message_service=message_service)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_use_case(
        self, message_service: MessageService
    ) -> ListConversationsUseCase:
        """Provide list conversations use case."""
        return ListConversationsUseCase(message_service=message_service)
