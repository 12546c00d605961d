from datetime import datetime

from formatters.base import SecondsPrefixRenderer


SECONDS_PER_DAY = 86400


def truncate_to_second(instant: datetime) -> int:
	# Whole wall-clock seconds since 0001-01-01 [sub-second part dropped]
	# Built from the rendered fields so equal keys always render equal prefixes
	return instant.toordinal() * SECONDS_PER_DAY + instant.hour * 3600 + instant.minute * 60 + instant.second


class SecondCache:
	"""
	Snapshot cache [default mode].

	Key and prefix live in a single immutable tuple that is swapped with one
	attribute assignment, so a reader never sees the key of one second paired
	with the prefix of another. Two threads hitting a new second together may
	both render it; that is accepted in exchange for never taking a lock.
	"""
	__slots__ = ("renderer", "_entry")
	mode = "snapshot"

	def __init__(self, renderer: SecondsPrefixRenderer):
		self.renderer = renderer
		# None: nothing cached yet
		self._entry = (None, "")

	def get_prefix(self, instant: datetime) -> str:
		key = truncate_to_second(instant)
		entry = self._entry
		if entry[0] != key:
			# New second
			entry = (key, self.renderer.render(instant))
			self._entry = entry
		return entry[1]

	@property
	def last_key(self):
		return self._entry[0]

	def clear(self):
		self._entry = (None, "")


class UnsynchronizedSecondCache:
	"""
	Literal per-second cache, intentionally unsynchronized.

	The key is stored before the prefix in two separate fields. A concurrent
	caller can read the new key while the prefix still belongs to the previous
	second. Only use it where that race is wanted for behavioral parity.
	"""
	__slots__ = ("renderer", "last_second_key", "last_prefix")
	mode = "unsynchronized"

	def __init__(self, renderer: SecondsPrefixRenderer):
		self.renderer = renderer
		self.last_second_key = None
		self.last_prefix = ""

	def get_prefix(self, instant: datetime) -> str:
		key = truncate_to_second(instant)
		if self.last_second_key != key:
			self.last_second_key = key
			self.last_prefix = self.renderer.render(instant)
		return self.last_prefix

	@property
	def last_key(self):
		return self.last_second_key

	def clear(self):
		self.last_second_key = None
		self.last_prefix = ""
