"""
Client-side staging of admin edits.

Edits are queued per entity and replayed against the API, one request at a
time, when the admin publishes. A failed entry is reported, never retried,
and earlier successes in the same batch stay applied on the server.
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Delay the admin UI waits after a clean publish before reloading server state.
RELOAD_DELAY_SECONDS = 1.5

ACTIONS = ("update", "create", "delete", "visibility")

# change type -> (create, update, delete) client methods
RESOURCES: Dict[str, Tuple[str, str, str]] = {
    "slider": ("create_slider", "update_slider", "delete_slider"),
    "section": ("create_home_section", "update_home_section", "delete_home_section"),
    "post": ("create_blog_post", "update_blog_post", "delete_blog_post"),
}

# change type -> flag a visibility change toggles
VISIBILITY_FIELDS = {"slider": "active", "section": "active", "post": "published"}

# server-managed fields dropped from create payloads
READ_ONLY_FIELDS = {"id", "createdAt", "updatedAt", "slug", "views", "publishedAt"}


@dataclass
class PendingChange:
    id: str
    type: str
    action: str
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)

    @property
    def key(self) -> Tuple[str, str]:
        return (self.id, self.type)


@dataclass
class PublishReport:
    succeeded: int = 0
    failed: int = 0
    errors: List[Tuple[PendingChange, Exception]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0


def apply_change(client, change: PendingChange) -> Any:
    """Issue the REST call that corresponds to one pending change."""
    create, update, delete = RESOURCES[change.type]

    if change.action == "create":
        payload = {k: v for k, v in change.data.items() if k not in READ_ONLY_FIELDS}
        return getattr(client, create)(payload)

    if change.action == "update":
        return getattr(client, update)(change.id, change.data)

    if change.action == "visibility":
        flag = VISIBILITY_FIELDS[change.type]
        return getattr(client, update)(change.id, {flag: change.data.get(flag)})

    return getattr(client, delete)(change.id)


class PendingChanges:
    """
    Ordered buffer of staged edits keyed by ``(id, type)``.

    Queuing a second edit for the same entity replaces the first one and
    moves it to the end of the queue.
    """

    def __init__(self):
        self._changes: Dict[Tuple[str, str], PendingChange] = {}

    def __len__(self) -> int:
        return len(self._changes)

    def __iter__(self) -> Iterator[PendingChange]:
        return iter(list(self._changes.values()))

    @property
    def has_changes(self) -> bool:
        return bool(self._changes)

    def add(self, id: str, type: str, action: str, data: Optional[Dict[str, Any]] = None) -> PendingChange:
        if type not in RESOURCES:
            raise ValueError(f"Unknown change type: {type}")
        if action not in ACTIONS:
            raise ValueError(f"Unknown change action: {action}")
        if action == "visibility" and (data or {}).get(VISIBILITY_FIELDS[type]) is None:
            raise ValueError(f"Visibility change for {type} needs '{VISIBILITY_FIELDS[type]}'")

        change = PendingChange(id=id, type=type, action=action, data=dict(data or {}))
        self._changes.pop(change.key, None)
        self._changes[change.key] = change
        return change

    def get(self, id: str, type: str) -> Optional[PendingChange]:
        return self._changes.get((id, type))

    def remove(self, id: str, type: str) -> Optional[PendingChange]:
        return self._changes.pop((id, type), None)

    def discard(self, on_discard: Optional[Callable[[], None]] = None) -> int:
        """Drop every staged edit. Returns how many were dropped."""
        dropped = len(self._changes)
        self._changes.clear()
        if on_discard is not None:
            on_discard()
        return dropped

    def publish(
        self,
        client,
        on_published: Optional[Callable[[PublishReport], None]] = None,
    ) -> PublishReport:
        """
        Replay every staged edit in order, one request at a time.

        Failures are counted and processing continues. The buffer is cleared
        only when every entry succeeded; otherwise it is left intact.
        """
        report = PublishReport()

        for change in self:
            try:
                apply_change(client, change)
            except Exception as exc:
                logger.error(
                    "Publishing %s %s %s failed: %s",
                    change.action, change.type, change.id, exc,
                )
                report.failed += 1
                report.errors.append((change, exc))
            else:
                report.succeeded += 1

        if report.ok:
            self._changes.clear()
            logger.info("Published %d change(s)", report.succeeded)
            if on_published is not None:
                on_published(report)
        else:
            logger.warning(
                "Publish finished with %d failure(s), %d succeeded; pending changes kept",
                report.failed, report.succeeded,
            )

        return report
