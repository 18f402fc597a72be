# ABOUTME: Template engine implementations
# ABOUTME: Provides the Jinja2 message renderer

from .jinja_renderer import JinjaMessageRenderer

__all__ = [
    "JinjaMessageRenderer",
]
