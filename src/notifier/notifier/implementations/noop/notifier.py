# ABOUTME: No-operation implementation of AbstractNotifier
# ABOUTME: Accepts every alert group and reports success without any I/O

from typing import Sequence, Union

from notifier.interfaces.notifier import AbstractNotifier
from notifier.models.alert import Alert
from notifier.models.notification import DeliveryVerdict, NotificationContext
from notifier.models.types import AlertData


class NoOpNotifier(AbstractNotifier):
    """
    No-operation implementation of AbstractNotifier.

    Always reports a successful delivery without rendering or sending anything.
    Useful for silenced receivers and for benchmarking the dispatcher without
    channel overhead.
    """

    async def notify(
        self,
        context: NotificationContext,
        alerts: Sequence[Union[Alert, AlertData]],
    ) -> DeliveryVerdict:
        return DeliveryVerdict.success()
