"""
Notification pipeline functions.

Stateless orchestration logic for the in-app notification inbox.
"""

from typing import Any, Dict

from pulse.community.services.notification_service import NotificationService


async def list_notifications_pipeline(
    notification_service: NotificationService,
    user_id: str,
    unread_only: bool = False
) -> Dict[str, Any]:
    """
    Get the user's notifications with the unread badge count.

    Returns:
        dict with notifications (newest first) and unreadCount
    """
    notifications = await notification_service.list_for_user(user_id, unread_only=unread_only)
    unread = await notification_service.unread_count(user_id)

    return {
        "notifications": notifications,
        "unreadCount": unread
    }


async def unread_count_pipeline(
    notification_service: NotificationService,
    user_id: str
) -> Dict[str, Any]:
    return {"unreadCount": await notification_service.unread_count(user_id)}


async def mark_notification_read_pipeline(
    notification_service: NotificationService,
    user_id: str,
    notification_id: str
) -> Dict[str, Any]:
    """
    Mark one notification as read.

    Returns:
        dict with the remaining unreadCount

    Raises:
        NotFoundException: Unknown notification or not the user's
    """
    await notification_service.mark_as_read(notification_id, user_id)
    return {"unreadCount": await notification_service.unread_count(user_id)}
