# ABOUTME: Abstract notifier interface for outbound notification channels
# ABOUTME: Defines the single-attempt delivery contract used by the dispatcher

from abc import abstractmethod, ABC
from typing import Sequence, Union

from notifier.models.alert import Alert
from notifier.models.notification import DeliveryVerdict, NotificationContext
from notifier.models.types import AlertData


class AbstractNotifier(ABC):
    """
    Abstract base class for notification channels.

    One call to ``notify`` is exactly one delivery attempt. Implementations do
    not retry, back off or persist anything; they report whether the attempt
    succeeded and, if not, whether a later attempt may succeed.
    """

    @abstractmethod
    async def notify(
        self,
        context: NotificationContext,
        alerts: Sequence[Union[Alert, AlertData]],
    ) -> DeliveryVerdict:
        """
        Deliver one alert group through this channel.

        Args:
            context: Receiver identity, group labels and cancellation signals.
            alerts: The alerts batched into this notification.

        Returns:
            DeliveryVerdict: ``(retryable, error)``. ``error`` is None on success,
                in which case ``retryable`` is always False.
        """
        pass
