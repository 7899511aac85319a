"""Strongly typed identifiers for blog domain entities.

Identifiers are assigned by storage on creation and never change afterwards.
"""

from typing import NewType

PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
TagId = NewType("TagId", int)
