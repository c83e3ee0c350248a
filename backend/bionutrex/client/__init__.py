from .api import CMSAPIError, CMSClient
from .content import HomeContent, load_home_content
from .pending import PendingChange, PendingChanges, PublishReport

__all__ = [
    "CMSAPIError",
    "CMSClient",
    "HomeContent",
    "load_home_content",
    "PendingChange",
    "PendingChanges",
    "PublishReport",
]
