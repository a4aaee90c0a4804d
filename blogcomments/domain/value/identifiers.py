"""Strongly typed identifiers for blog comment entities.

Identifiers are integers assigned by the database on insert. NewType keeps
a ReplyId from being passed where a CommentId is expected.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
ReplyId = NewType("ReplyId", int)

# Owned by the blog platform; only referenced here
BlogId = NewType("BlogId", int)
