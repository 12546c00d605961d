from datetime import datetime

from formatters.base import DateFormatter, OutputSink
from formatters.cache import SecondCache, UnsynchronizedSecondCache
from formatters.absolute import AbsoluteTimeRenderer
from formatters.date import DateTimeRenderer
from formatters.iso8601 import Iso8601Renderer

from utils.config import Config


# Identifiers used by layouts to select a formatter
ABSOLUTE_TIME_DATE_FORMAT = "ABSOLUTE"
DATE_AND_TIME_DATE_FORMAT = "DATE"
ISO8601_TIME_DATE_FORMAT = "ISO8601"

RENDERERS = {
	ABSOLUTE_TIME_DATE_FORMAT: AbsoluteTimeRenderer,
	DATE_AND_TIME_DATE_FORMAT: DateTimeRenderer,
	ISO8601_TIME_DATE_FORMAT: Iso8601Renderer,
}

CACHE_MODES = {
	SecondCache.mode: SecondCache,
	UnsynchronizedSecondCache.mode: UnsynchronizedSecondCache,
}

# Process-wide formatters [one per identifier]
_shared = {}


def create_formatter(name: str = ABSOLUTE_TIME_DATE_FORMAT, cache_mode: str = SecondCache.mode) -> DateFormatter:
	# Layouts pass identifiers and modes in any case
	key = str(name).upper()
	mode = str(cache_mode).lower()
	if key not in RENDERERS:
		raise KeyError(f'Date format {name} is not available, select one of {list(RENDERERS.keys())}')
	if mode not in CACHE_MODES:
		raise ValueError(f'Cache mode {cache_mode} is not available, select one of {list(CACHE_MODES.keys())}')
	return DateFormatter(CACHE_MODES[mode](RENDERERS[key]()))


def get_formatter(name: str = None, cache_mode: str = None) -> DateFormatter:
	# None selects the configured default format [alias of the named instance]
	key = None if name is None else str(name).upper()
	formatter = _shared.get(key)
	if formatter is not None:
		return formatter

	# Config is read only for what the caller left unset, never on the hot path
	if key is None or cache_mode is None:
		cfg = Config().formatter
		resolved = str(cfg.name).upper() if key is None else key
		cache_mode = cfg.cache_mode if cache_mode is None else cache_mode
	else:
		resolved = key

	# cache_mode only applies when the shared instance is first built
	formatter = _shared.get(resolved)
	if formatter is None:
		# Two callers may race here, the loser's formatter is simply dropped
		formatter = _shared.setdefault(resolved, create_formatter(resolved, cache_mode))
	if key is None:
		formatter = _shared.setdefault(None, formatter)
	return formatter


def reset_formatters():
	_shared.clear()


def format_date(instant: datetime, sink: OutputSink) -> None:
	get_formatter().format_date(instant, sink)
