"""Message use cases."""

from .common import MessageItem
from .count_unread import CountUnreadRequest, CountUnreadResponse, CountUnreadUseCase
from .fetch_new import (
    FetchNewMessagesRequest,
    FetchNewMessagesResponse,
    FetchNewMessagesUseCase,
)
from .list_conversations import (
    ConversationItem,
    ListConversationsRequest,
    ListConversationsResponse,
    ListConversationsUseCase,
)
from .list_thread import ListThreadRequest, ListThreadResponse, ListThreadUseCase
from .send_message import SendMessageRequest, SendMessageResponse, SendMessageUseCase

__all__ = [
    "MessageItem",
    "ConversationItem",
    "CountUnreadRequest",
    "CountUnreadResponse",
    "CountUnreadUseCase",
    "FetchNewMessagesRequest",
    "FetchNewMessagesResponse",
    "FetchNewMessagesUseCase",
    "ListConversationsRequest",
    "ListConversationsResponse",
    "ListConversationsUseCase",
    "ListThreadRequest",
    "ListThreadResponse",
    "ListThreadUseCase",
    "SendMessageRequest",
    "SendMessageResponse",
    "SendMessageUseCase",
]
