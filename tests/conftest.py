"""Shared fixtures for formatter tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from formatters import AbsoluteTimeRenderer, reset_formatters


class CountingRenderer(AbsoluteTimeRenderer):
	"""Absolute renderer that records how often the prefix is rendered."""

	def __init__(self) -> None:
		self.calls = 0

	def render(self, instant: datetime) -> str:
		self.calls += 1
		return super().render(instant)


@pytest.fixture()
def counting_renderer() -> CountingRenderer:
	return CountingRenderer()


@pytest.fixture(autouse=True)
def _fresh_shared_formatters():
	reset_formatters()
	yield
	reset_formatters()


@pytest.fixture()
def tmp_config(tmp_path: Path) -> Path:
	"""Config file writing logs into the temp directory."""
	p = tmp_path / "config.yaml"
	p.write_text(
		"formatter:\n"
		"  name: ABSOLUTE\n"
		"  cache_mode: unsynchronized\n"
		"logger:\n"
		f"  path: {tmp_path / 'logs'}\n"
		"  level: debug\n"
		"  console: false\n"
	)
	return p
