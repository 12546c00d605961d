from datetime import datetime

from formatters.base import SecondsPrefixRenderer, append_two_digits


class AbsoluteTimeRenderer(SecondsPrefixRenderer):
	"""HH:mm:ss, e.g. 15:49:37"""
	name = "ABSOLUTE"

	def render(self, instant: datetime) -> str:
		buf = []
		append_two_digits(buf, instant.hour)
		buf.append(':')
		append_two_digits(buf, instant.minute)
		buf.append(':')
		append_two_digits(buf, instant.second)
		return ''.join(buf)
