from typing import Any, Dict, List, Optional
from flask import current_app
from bionutrex.extensions import db
from bionutrex.models.blog_post import BlogPost
from bionutrex.domain.invariants.content import assert_blog_post
from bionutrex.domain.lifecycle.blog_post import apply_publish_state
from bionutrex.utils.audit import log_action
from bionutrex.utils.forms import parse_bool
from bionutrex.utils.slug import unique_slug
from bionutrex.utils.transaction import transactional
from .common import apply_image, apply_text

EXCERPT_LENGTH = 160


def default_excerpt(content: str) -> str:
    text = " ".join(content.split())
    if len(text) <= EXCERPT_LENGTH:
        return text
    return text[:EXCERPT_LENGTH].rstrip()


def list_published_posts() -> List[BlogPost]:
    return (
        BlogPost.query
        .filter_by(published=True)
        .order_by(BlogPost.published_at.desc(), BlogPost.created_at.desc())
        .all()
    )


def list_all_posts() -> List[BlogPost]:
    return BlogPost.query.order_by(BlogPost.created_at.desc()).all()


def get_post(post_id: str) -> BlogPost:
    return BlogPost.query.filter_by(id=post_id).first_or_404(description="Post not found")


def read_published_post(slug: str) -> BlogPost:
    """
    Fetch a published post for a public reader and count the view.
    """
    post = BlogPost.query.filter_by(slug=slug, published=True).first_or_404(
        description="Post not found"
    )

    with transactional():
        # increment in SQL so concurrent readers do not lose counts
        BlogPost.query.filter_by(id=post.id).update(
            {BlogPost.views: BlogPost.views + 1},
            synchronize_session=False,
        )

    db.session.refresh(post)
    return post


def create_blog_post(*, data: Dict[str, Any], image_url: Optional[str] = None) -> BlogPost:
    """
    Create a post with a unique slug derived from its title.

    Edge cases handled:
    - Title collisions (slug gets -1, -2, ...)
    - Missing excerpt (taken from the content)
    - Missing author (DEFAULT_AUTHOR)
    """
    assert_blog_post(data)

    title = str(data["title"])
    content = str(data["content"])

    post = BlogPost()
    post.title = title
    post.slug = unique_slug(BlogPost, title)
    post.content = content
    post.excerpt = str(data.get("excerpt") or "").strip() or default_excerpt(content)
    post.author = str(data.get("author") or "").strip() or current_app.config["DEFAULT_AUTHOR"]
    post.views = 0
    post.published = False
    apply_image(post, data, image_url)

    published = data.get("published")
    apply_publish_state(post, parse_bool(published, "published") if published is not None else False)

    with transactional():
        db.session.add(post)
        db.session.flush()

    log_action(
        action="post.create",
        entity_type="post",
        entity_id=post.id,
        payload={"slug": post.slug, "published": post.published},
    )
    return post


def update_blog_post(
    *,
    post_id: str,
    data: Dict[str, Any],
    image_url: Optional[str] = None,
) -> BlogPost:
    """
    Partial update. The slug follows the title only when the title changes.
    """
    post = get_post(post_id)

    with transactional():
        title = data.get("title")
        if title and str(title).strip() and title != post.title:
            post.title = str(title)
            post.slug = unique_slug(BlogPost, post.title, exclude_id=post.id)

        for field in ("excerpt", "content", "author"):
            apply_text(post, field, data, field, required=True)

        apply_image(post, data, image_url)

        if data.get("published") is not None:
            apply_publish_state(post, parse_bool(data["published"], "published"))

    log_action(
        action="post.update",
        entity_type="post",
        entity_id=post.id,
        payload={"fields": sorted(data.keys()), "slug": post.slug},
    )
    return post


def delete_blog_post(*, post_id: str) -> None:
    post = get_post(post_id)

    with transactional():
        db.session.delete(post)

    log_action(action="post.delete", entity_type="post", entity_id=post_id)
