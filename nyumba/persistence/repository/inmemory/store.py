"""Shared in-memory state for the in-memory repositories."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from nyumba.domain.model import Account, Mentorship, MentorshipRequest, Message
from nyumba.domain.value import (
    MentorshipId,
    MentorshipRequestId,
    MessageId,
    UserId,
)


@dataclass
class InMemoryStore:
    """Tables and id sequences shared by every in-memory repository.

    One store lives for the whole test container so that state survives
    across requests and is visible to every repository.
    """

    accounts: dict[UserId, Account] = field(default_factory=dict)
    requests: dict[MentorshipRequestId, MentorshipRequest] = field(
        default_factory=dict
    )
    mentorships: dict[MentorshipId, Mentorship] = field(default_factory=dict)
    messages: dict[MessageId, Message] = field(default_factory=dict)
    rate_limit_events: list[tuple[str, datetime]] = field(default_factory=list)
    sequences: dict[str, int] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        """Next value of an auto-increment sequence, starting at 1."""
        value = self.sequences.get(table, 0) + 1
        self.sequences[table] = value
        return value

    def snapshot(self) -> "InMemoryStore":
        # Models are frozen, so copying the containers is enough
        return replace(
            self,
            accounts=dict(self.accounts),
            requests=dict(self.requests),
            mentorships=dict(self.mentorships),
            messages=dict(self.messages),
            rate_limit_events=list(self.rate_limit_events),
            sequences=dict(self.sequences),
        )

    def restore(self, snapshot: "InMemoryStore") -> None:
        self.accounts = snapshot.accounts
        self.requests = snapshot.requests
        self.mentorships = snapshot.mentorships
        self.messages = snapshot.messages
        self.rate_limit_events = snapshot.rate_limit_events
        self.sequences = snapshot.sequences
