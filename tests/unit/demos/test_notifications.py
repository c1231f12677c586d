"""Unit tests for the factory method demo."""

import pytest

from pattern_kit.core.patterns import UnknownVariantError
from pattern_kit.demos.notifications import (
    EmailNotification,
    EmailService,
    PushNotification,
    PushService,
    SmsNotification,
    SmsService,
    get_notification_service,
    run_demo,
)


class TestNotificationServices:
    """Tests for the factory method on each service."""

    @pytest.mark.parametrize(
        "service_cls,notification_cls",
        [
            (EmailService, EmailNotification),
            (SmsService, SmsNotification),
            (PushService, PushNotification),
        ],
    )
    def test_create_notification(self, service_cls, notification_cls):
        """Test each service builds its own notification."""
        assert isinstance(service_cls().create_notification(), notification_cls)

    def test_notify(self):
        """Test notify sends through the created notification."""
        assert SmsService().notify("Code: 1234") == "Sending SMS: Code: 1234"

    def test_notify_empty_message(self):
        """Test empty messages are rejected."""
        with pytest.raises(ValueError):
            EmailService().notify("")


class TestGetNotificationService:
    """Tests for get_notification_service."""

    def test_lookup(self):
        """Test channel lookup is case-insensitive."""
        assert isinstance(get_notification_service("Email"), EmailService)

    def test_unknown_channel(self):
        """Test unknown channel raises UnknownVariantError."""
        with pytest.raises(UnknownVariantError):
            get_notification_service("pigeon")


class TestNotificationsDemo:
    def test_run_demo(self):
        assert run_demo() == [
            "Sending email: Your order has shipped",
            "Sending SMS: Your order has shipped",
            "Sending push notification: Your order has shipped",
        ]
