from .common import iso, timestamps


def normalize_blog_post(post):
    return {
        "id": post.id,
        "title": post.title,
        "slug": post.slug,
        "excerpt": post.excerpt,
        "content": post.content,
        "imageUrl": post.image_url,
        "author": post.author,
        "published": post.published,
        "publishedAt": iso(post.published_at),
        "views": post.views,
        **timestamps(post),
    }
