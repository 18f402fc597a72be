# ABOUTME: Abstract message renderer interface for turning alert groups into text
# ABOUTME: Defines the contract between notification channels and template engines

from abc import abstractmethod, ABC

from notifier.models.alert import AlertGroupView
from notifier.models.notification import RenderedMessage


class AbstractMessageRenderer(ABC):
    """
    Abstract base class for message renderers.

    A renderer is a pure function from an alert group view and two template
    strings to rendered title and body text. It must attempt both templates
    and either return both rendered strings or raise a single error covering
    every template that failed. It never returns a partially rendered message.
    """

    @abstractmethod
    def render(self, view: AlertGroupView, title_template: str, body_template: str) -> RenderedMessage:
        """
        Render the title and body templates against the alert group view.

        Args:
            view: Template data built from the alerts of one delivery attempt.
            title_template: Template source for the message title.
            body_template: Template source for the message body.

        Returns:
            RenderedMessage: The rendered title and body.

        Raises:
            RenderError: If either template fails to compile or evaluate.
        """
        pass
