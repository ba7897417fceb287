"""Strongly typed identifiers for Nyumba Connect domain entities.

Identifiers are integers assigned by the database. Message ids increase
in insertion order, which makes them usable as a polling watermark.
"""

from typing import NewType

UserId = NewType("UserId", int)
MentorshipRequestId = NewType("MentorshipRequestId", int)
MentorshipId = NewType("MentorshipId", int)
MessageId = NewType("MessageId", int)
