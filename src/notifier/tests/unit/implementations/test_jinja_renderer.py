# ABOUTME: Unit tests for JinjaMessageRenderer
# ABOUTME: Tests rendering of default templates and aggregation of template errors

from datetime import datetime, timedelta, UTC

import pytest

from notifier.config.channels import DEFAULT_MESSAGE_TEMPLATE, DEFAULT_TITLE_TEMPLATE
from notifier.exceptions import RenderError
from notifier.implementations.template.jinja_renderer import JinjaMessageRenderer
from notifier.models.alert import Alert, AlertGroupView


@pytest.fixture
def renderer():
    return JinjaMessageRenderer()


@pytest.fixture
def view():
    alerts = [
        Alert(
            labels={"alertname": "HighCPU", "instance": "web-1"},
            annotations={"summary": "CPU above 90%"},
            generator_url="http://prometheus.local/graph",
        ),
        Alert(
            labels={"alertname": "HighCPU", "instance": "web-2"},
            ends_at=datetime.now(UTC) - timedelta(minutes=1),
        ),
    ]
    return AlertGroupView.from_alerts("ops-team", {"alertname": "HighCPU", "env": "prod"}, alerts)


class TestJinjaMessageRenderer:
    """Test the Jinja2 message renderer."""

    @pytest.mark.unit
    def test_renders_title_and_body(self, renderer, view):
        message = renderer.render(view, "{{ receiver }}: {{ status }}", "{{ alerts|length }} alerts")

        assert message.title == "ops-team: firing"
        assert message.body == "2 alerts"

    @pytest.mark.unit
    def test_default_title(self, renderer, view):
        message = renderer.render(view, DEFAULT_TITLE_TEMPLATE, "")

        assert message.title == "[FIRING:1] HighCPU prod"

    @pytest.mark.unit
    def test_default_title_orders_group_labels_by_name(self, renderer):
        view = AlertGroupView.from_alerts("ops-team", {"zone": "eu-1", "alertname": "DiskFull"}, [Alert()])

        message = renderer.render(view, DEFAULT_TITLE_TEMPLATE, "")

        assert message.title == "[FIRING:1] DiskFull eu-1"

    @pytest.mark.unit
    def test_default_message(self, renderer, view):
        message = renderer.render(view, "", DEFAULT_MESSAGE_TEMPLATE)

        assert "#### HighCPU (firing)" in message.body
        assert "#### HighCPU (resolved)" in message.body
        assert "- instance: web-1" in message.body
        assert "- summary: CPU above 90%" in message.body
        assert "[source](http://prometheus.local/graph)" in message.body

    @pytest.mark.unit
    def test_title_syntax_error(self, renderer, view):
        with pytest.raises(RenderError) as exc_info:
            renderer.render(view, "{{ status ", "{{ receiver }}")

        error = exc_info.value
        assert "title" in str(error)
        assert set(error.details["templates"]) == {"title"}
        assert error.retryable is False

    @pytest.mark.unit
    def test_both_templates_reported(self, renderer, view):
        with pytest.raises(RenderError) as exc_info:
            renderer.render(view, "{% if %}", "{{ missing_variable }}")

        failures = exc_info.value.details["templates"]
        assert set(failures) == {"title", "content"}
        assert "UndefinedError" in failures["content"]
        assert "title:" in str(exc_info.value)
        assert "content:" in str(exc_info.value)

    @pytest.mark.unit
    def test_undefined_variable_is_an_error(self, renderer, view):
        with pytest.raises(RenderError):
            renderer.render(view, "{{ group_labels.nothing_here }}", "")

    @pytest.mark.unit
    def test_evaluation_error_is_an_error(self, renderer, view):
        with pytest.raises(RenderError) as exc_info:
            renderer.render(view, "ok", "{{ 1 / 0 }}")

        assert "ZeroDivisionError" in exc_info.value.details["templates"]["content"]

    @pytest.mark.unit
    def test_sandbox_blocks_unsafe_access(self, renderer, view):
        with pytest.raises(RenderError):
            renderer.render(view, "{{ receiver.__class__.__mro__ }}", "")

    @pytest.mark.unit
    def test_templates_are_cached(self, renderer, view):
        renderer.render(view, "{{ receiver }}", "{{ status }}")
        renderer.render(view, "{{ receiver }}", "{{ status }}")

        assert renderer._compile.cache_info().hits == 2

    @pytest.mark.unit
    def test_runaway_recursion_is_an_error(self, renderer, view):
        with pytest.raises(RenderError) as exc_info:
            renderer.render(view, "{% macro f() %}{{ f() }}{% endmacro %}{{ f() }}", "{{ status }}")

        assert set(exc_info.value.details["templates"]) == {"title"}
        assert "RecursionError" in exc_info.value.details["templates"]["title"]

    @pytest.mark.unit
    def test_any_exception_from_a_callable_is_an_error(self, renderer, view):
        def lookup_owner():
            raise AttributeError("owner")

        renderer._env.globals["lookup_owner"] = lookup_owner

        with pytest.raises(RenderError) as exc_info:
            renderer.render(view, "ok", "{{ lookup_owner() }}")

        assert exc_info.value.retryable is False
        assert "AttributeError: owner" in exc_info.value.details["templates"]["content"]
