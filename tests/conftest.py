"""Pytest configuration and fixtures."""

import pytest

from asciibox.renderers import AnsiRenderer, HtmlRenderConfig, HtmlRenderer, PlainRenderer


@pytest.fixture
def plain():
    return PlainRenderer()


@pytest.fixture
def ansi_renderer():
    return AnsiRenderer()


@pytest.fixture
def html_renderer():
    return HtmlRenderer()


@pytest.fixture
def pretty_html():
    return HtmlRenderer(HtmlRenderConfig(indent=True, indent_size=2))
