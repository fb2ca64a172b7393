"""Inbox read side: listing, unread counts and retention cleanup."""

from datetime import UTC, datetime, timedelta

import structlog
from protean.utils.globals import current_domain

from dispatch.inbox.notification import InAppNotification

logger = structlog.get_logger(__name__)


def list_notifications(tenant_id: str, user_id: str, unread_only: bool = False, limit: int = 50):
    """Newest first."""
    repo = current_domain.repository_for(InAppNotification)
    criteria = {"tenant_id": str(tenant_id), "user_id": str(user_id)}
    if unread_only:
        criteria["is_read"] = False

    items = repo._dao.query.filter(**criteria).all().items
    items.sort(key=lambda n: n.created_at, reverse=True)
    return items[:limit]


def unread_count(tenant_id: str, user_id: str) -> int:
    repo = current_domain.repository_for(InAppNotification)
    return len(
        repo._dao.query.filter(tenant_id=str(tenant_id), user_id=str(user_id), is_read=False).all().items
    )


def delete_old_notifications(days_old: int = 30, now=None) -> int:
    """Delete read notifications older than ``days_old`` days. Returns the count."""
    cutoff = (now or datetime.now(UTC)) - timedelta(days=days_old)
    repo = current_domain.repository_for(InAppNotification)

    deleted = 0
    for notification in repo._dao.query.filter(is_read=True).all().items:
        if notification.created_at and notification.created_at < cutoff:
            repo._dao.delete(notification)
            deleted += 1

    if deleted:
        logger.info("Deleted old in-app notifications", count=deleted, days_old=days_old)
    return deleted
