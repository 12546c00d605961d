from datetime import datetime

from formatters.base import SecondsPrefixRenderer, append_two_digits
from formatters.absolute import AbsoluteTimeRenderer


# Fixed English abbreviations [no locale lookup]
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class DateTimeRenderer(SecondsPrefixRenderer):
	"""dd MMM yyyy HH:mm:ss, e.g. 06 Nov 1994 15:49:37"""
	name = "DATE"

	def __init__(self):
		self._time = AbsoluteTimeRenderer()

	def render(self, instant: datetime) -> str:
		buf = []
		append_two_digits(buf, instant.day)
		buf.append(' ')
		buf.append(MONTHS[instant.month - 1])
		buf.append(f' {instant.year:04d} ')
		buf.append(self._time.render(instant))
		return ''.join(buf)
