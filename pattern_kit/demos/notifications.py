"""Factory Method: each service subclass decides which notification to build."""

from abc import ABC, abstractmethod
from typing import Dict, List, Type

from ..constants import DEFAULT_NOTIFICATION_MESSAGE
from ..core.patterns.exceptions import UnknownVariantError


class Notification(ABC):
    """A message delivered over one channel."""

    @abstractmethod
    def send(self, message: str) -> str:
        """Deliver the message and return the delivery line."""


class EmailNotification(Notification):
    def send(self, message: str) -> str:
        return f"Sending email: {message}"


class SmsNotification(Notification):
    def send(self, message: str) -> str:
        return f"Sending SMS: {message}"


class PushNotification(Notification):
    def send(self, message: str) -> str:
        return f"Sending push notification: {message}"


class NotificationService(ABC):
    """
    Creator in the Factory Method pattern.

    `notify()` is shared; subclasses override `create_notification()` to
    choose the concrete notification.
    """

    channel: str

    @abstractmethod
    def create_notification(self) -> Notification:
        """Factory method."""

    def notify(self, message: str) -> str:
        if not message:
            raise ValueError("message must not be empty")
        return self.create_notification().send(message)


class EmailService(NotificationService):
    channel = "email"

    def create_notification(self) -> Notification:
        return EmailNotification()


class SmsService(NotificationService):
    channel = "sms"

    def create_notification(self) -> Notification:
        return SmsNotification()


class PushService(NotificationService):
    channel = "push"

    def create_notification(self) -> Notification:
        return PushNotification()


SERVICES: Dict[str, Type[NotificationService]] = {
    cls.channel: cls for cls in (EmailService, SmsService, PushService)
}


def get_notification_service(channel: str) -> NotificationService:
    """Return the service for a channel key.

    Raises:
        UnknownVariantError: If the channel is not known
    """
    service_cls = SERVICES.get(channel.strip().lower())
    if service_cls is None:
        raise UnknownVariantError("notification channel", channel, SERVICES)
    return service_cls()


def run_demo() -> List[str]:
    return [
        get_notification_service(channel).notify(DEFAULT_NOTIFICATION_MESSAGE)
        for channel in SERVICES
    ]
