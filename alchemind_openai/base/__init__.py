"""Core building blocks: handle, execution adapter, translation, options, errors, logging."""

from .errors import BridgeError, ErrorCode, classify_exception
from .handle import ClientHandle, create_client
from .logging import LogContext, configure_logger, get_logger
from .notifications import CallbackNotifier, Notification, NotificationTag, Notifier, QueueNotifier

__all__ = [
    "BridgeError",
    "ErrorCode",
    "classify_exception",
    "ClientHandle",
    "create_client",
    "LogContext",
    "configure_logger",
    "get_logger",
    "CallbackNotifier",
    "Notification",
    "NotificationTag",
    "Notifier",
    "QueueNotifier",
]
