from datetime import datetime, timezone


def apply_publish_state(post, published: bool) -> None:
    """
    Set a post's published flag.

    publishedAt is stamped the first time a post goes live and kept when it
    is unpublished, so re-publishing does not move it in the public feed.
    """
    if published and not post.published and post.published_at is None:
        post.published_at = datetime.now(timezone.utc)

    post.published = published
