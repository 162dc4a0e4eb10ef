"""Strongly typed identifiers for blog domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting. Identifiers are integers
assigned by the owning store.
"""

from typing import NewType

# Core domain entity identifiers
UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
ReactionId = NewType("ReactionId", int)
