from io import StringIO
from datetime import datetime
from typing import Protocol


class OutputSink(Protocol):
	def write(self, s: str) -> object: ...


def append_two_digits(buf: list, value: int):
	# Values are 0-99 by contract, no generic padding
	if value < 10:
		buf.append('0')
	buf.append(str(value))


class SecondsPrefixRenderer:
	"""
	Renders an instant into a string with a precision up to the second.

	Called at most once per second by the owning cache, the result is reused
	for every other instant that falls in the same second.
	"""
	name = None

	def render(self, instant: datetime) -> str:
		raise NotImplementedError('Should be implemented by child renderer')


class DateFormatter:
	"""Renders `<prefix>,mmm` where the prefix comes from a per-second cache."""
	__slots__ = ("cache",)

	def __init__(self, cache):
		self.cache = cache

	@property
	def renderer(self) -> SecondsPrefixRenderer:
		return self.cache.renderer

	def format_date(self, instant: datetime, sink: OutputSink) -> None:
		# Cached part [recomputed on second boundaries only]
		sink.write(self.cache.get_prefix(instant))

		# Millis are always fresh
		sink.write(',')
		millis = instant.microsecond // 1000
		if millis < 100:
			sink.write('0')
		if millis < 10:
			sink.write('0')
		sink.write(str(millis))

	def format(self, instant: datetime) -> str:
		buf = StringIO()
		self.format_date(instant, buf)
		return buf.getvalue()

	def __repr__(self):
		return f'{type(self).__name__}(renderer={self.renderer.name}, mode={self.cache.mode})'
