"""Read models combining a comment with its replies."""

from typing import Optional

from blogcomments.domain.model.comment import Comment
from blogcomments.domain.model.common import DomainModel
from blogcomments.domain.model.reply import Reply


class CommentThread(DomainModel):
    """A comment with its replies in ascending creation order."""

    comment: Comment
    replies: list[Reply] = []


class AdminCommentThread(CommentThread):
    """A comment as seen by moderators, with the title of its blog.

    ``blog_title`` is None when the blog no longer exists.
    """

    blog_title: Optional[str] = None
