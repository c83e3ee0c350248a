from .admin import Admin
from .slider import Slider
from .home_section import HomeSection
from .section_image import SectionImage
from .blog_post import BlogPost

__all__ = ["Admin", "Slider", "HomeSection", "SectionImage", "BlogPost"]
