"""Post service - the local sharing feed.

Only the user's own posts are stored; the feed is returned newest first.
"""

from __future__ import annotations

import secrets
import string
from datetime import timedelta
from typing import Literal

from pomotask.exceptions import StorageError, ValidationError
from pomotask.models.post import SNSPost
from pomotask.repositories import POSTS_KEY, KeyValueStore, StoredDocument
from pomotask.utils.dates import Clock, calendar_day, local_midnight, system_clock, to_local
from pomotask.utils.logger import get_logger

PostFilter = Literal["today", "week", "all"]

CURRENT_USER_ID = "user_current"
CURRENT_USER_NAME = "あなた"
CURRENT_USER_ICON = "👤"

_ID_ALPHABET = string.ascii_lowercase + string.digits


class PostService:
    """Service owning the user's posts."""

    def __init__(self, store: KeyValueStore, clock: Clock = system_clock):
        self._document: StoredDocument[list[SNSPost]] = StoredDocument(
            store, POSTS_KEY, list[SNSPost]
        )
        self._clock = clock
        self._posts: list[SNSPost] | None = None
        self.logger = get_logger(__name__)

    @property
    def posts(self) -> list[SNSPost]:
        if self._posts is None:
            loaded = self._document.load(default=[])
            self._posts = sorted(loaded, key=lambda p: to_local(p.created_at), reverse=True)
        return list(self._posts)

    def _commit(self, posts: list[SNSPost]) -> None:
        self._posts = posts
        try:
            self._document.save(posts)
        except StorageError:
            self.logger.error("failed to persist %d posts", len(posts))
            raise

    def add_post(self, message: str, focus_minutes: int) -> SNSPost:
        """Publish a message about a finished focus session.

        Raises:
            ValidationError: If the message is blank or minutes are negative
        """
        if not message or not message.strip():
            raise ValidationError("Post message cannot be empty")
        if focus_minutes < 0:
            raise ValidationError("Focus minutes cannot be negative")

        now = self._clock()
        suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
        post = SNSPost(
            id=f"post_{int(now.timestamp() * 1000)}_{suffix}",
            user_id=CURRENT_USER_ID,
            user_name=CURRENT_USER_NAME,
            user_icon=CURRENT_USER_ICON,
            message=message.strip(),
            focus_minutes=focus_minutes,
            created_at=now,
            is_own=True,
        )
        self._commit([post, *self.posts])
        self.logger.info("post added: %s", post.id)
        return post

    def delete_post(self, post_id: str) -> bool:
        """Remove a post. Unknown ids are ignored and nothing is saved.

        Returns:
            True if a post was removed
        """
        remaining = [p for p in self.posts if p.id != post_id]
        if len(remaining) == len(self.posts):
            self.logger.debug("no post to delete: %s", post_id)
            return False
        self._commit(remaining)
        self.logger.info("post deleted: %s", post_id)
        return True

    def get_posts(self, post_filter: PostFilter = "all") -> list[SNSPost]:
        """Posts from today, from the last seven days, or all of them."""
        if post_filter == "all":
            return self.posts

        now = self._clock()
        today = calendar_day(now)
        if post_filter == "today":
            return [p for p in self.posts if calendar_day(p.created_at) == today]

        week_ago = local_midnight(today) - timedelta(days=7)
        return [p for p in self.posts if to_local(p.created_at) >= week_ago]
