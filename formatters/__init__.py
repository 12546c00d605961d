from formatters.base import DateFormatter, OutputSink, SecondsPrefixRenderer, append_two_digits
from formatters.cache import SecondCache, UnsynchronizedSecondCache, truncate_to_second
from formatters.absolute import AbsoluteTimeRenderer
from formatters.date import DateTimeRenderer
from formatters.iso8601 import Iso8601Renderer
from formatters.registry import (ABSOLUTE_TIME_DATE_FORMAT, DATE_AND_TIME_DATE_FORMAT, ISO8601_TIME_DATE_FORMAT,
								 RENDERERS, CACHE_MODES, create_formatter, get_formatter, reset_formatters, format_date)
