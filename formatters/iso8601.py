from datetime import datetime

from formatters.base import SecondsPrefixRenderer, append_two_digits
from formatters.absolute import AbsoluteTimeRenderer


class Iso8601Renderer(SecondsPrefixRenderer):
	"""yyyy-MM-dd HH:mm:ss, e.g. 1994-11-06 15:49:37"""
	name = "ISO8601"

	def __init__(self):
		self._time = AbsoluteTimeRenderer()

	def render(self, instant: datetime) -> str:
		buf = [f'{instant.year:04d}', '-']
		append_two_digits(buf, instant.month)
		buf.append('-')
		append_two_digits(buf, instant.day)
		buf.append(' ')
		buf.append(self._time.render(instant))
		return ''.join(buf)
