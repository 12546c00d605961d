import os
import sys
import atexit
import logging
import traceback
from datetime import datetime

from omegaconf import DictConfig

from formatters import DateFormatter, create_formatter
from utils.config import Config

try:
	# POSIX file lock
	import fcntl
	_HAS_FCNTL = True
except ImportError:
	_HAS_FCNTL = False


class Logger:
	def __init__(self, name: str, cfg: Config = None, date_formatter: DateFormatter = None):
		self.name = name
		cfg = cfg if cfg is not None else Config()
		self.cfg: DictConfig = cfg.logger

		# Current File Path [directory is created on first write]
		self.f_path = os.path.join(self.cfg.path, f"{self.name}.log")

		# File
		self._fd = None
		# Closed Flag
		self._closed = False

		# Timestamp Formatter
		if date_formatter is None:
			date_formatter = create_formatter(cfg.formatter.name, cfg.formatter.cache_mode)
		self.date_fmt = date_formatter

		# In-memory batching buffer
		self._buf = bytearray()
		atexit.register(self._atexit_flush_close)

		# Log Level
			# Default is INFO
		self._LEVELS = {"debug": logging.DEBUG, "info": logging.INFO, "warning": logging.WARNING, "error": logging.ERROR,}
		self.level = self._LEVELS.get(str(self.cfg.level).lower(), logging.INFO)

		self.debug(f'Timestamp format {self.date_fmt.renderer.name}, cache mode {self.date_fmt.cache.mode}')

	def debug(self, msg: str):
		self._log(logging.DEBUG, msg)

	def info(self, msg: str):
		self._log(logging.INFO, msg)

	def warning(self, msg: str):
		self._log(logging.WARNING, msg)

	def error(self, msg: str):
		self._log(logging.ERROR, msg)

	def _log(self, level: int, message: str):
		# Skip logging for stuff lower than the current level
		if self._closed or level < self.level:
			return

		# Format Time
		ts = self.date_fmt.format(datetime.now())
		level_name = logging.getLevelName(level)
		# Build once with minimal allocations
		line = f"{ts} - {level_name} - {self.name} - {message}\n"

		# Console (cheap path: no per-call flush)
		if self.cfg.console:
			try:
				sys.stdout.write(line)
				if self.cfg.console_flush:
					sys.stdout.flush()
			except (OSError, ValueError):
				# Avoid raising from logger
				sys.stderr.write("Logger console write error\n")

		# File
		data = line.encode("utf-8", "strict")
		if self.cfg.buf_threshold > 0:
			# Extend the Byte array
			self._buf.extend(data)
			# Write to file if the current bytearray length is bigger than the threshold
			if len(self._buf) >= self.cfg.buf_threshold:
				self._write_bytes(self._buf)
				self._buf.clear()
		else:
			self._write_bytes(data)

	def _write_bytes(self, data):
		# Skip if empty
		if not data or self._closed:
			return

		locked = False
		try:
			fd = self.fd
			# Lock
			if self.cfg.lock and _HAS_FCNTL:
				fcntl.flock(fd, fcntl.LOCK_EX)
				locked = True
			mv = memoryview(data)
			total = 0
			while total < len(mv):
				n = os.write(fd, mv[total:])
				if n <= 0:
					break
				total += n
		except OSError:
			sys.stderr.write("Error writing log to file\n")
			traceback.print_exc()
		finally:
			if locked:
				fcntl.flock(self._fd, fcntl.LOCK_UN)

	def set_level(self, level_name_or_int):
		if isinstance(level_name_or_int, int):
			self.level = level_name_or_int
		else:
			self.level = self._LEVELS.get(str(level_name_or_int).lower(), self.level)

	def shutdown(self):
		# Flush and close resources (synchronous)
		if self._closed:
			return
		try:
			self.flush()
		finally:
			# Mark closed before os.close so the fd number is never closed twice
			fd, self._fd = self._fd, None
			self._closed = True
			atexit.unregister(self._atexit_flush_close)
			if fd is not None:
				os.close(fd)

	def flush(self):
		# Force-flush any buffered log lines to disk
		if self._closed:
			return
		if self._buf:
			self._write_bytes(self._buf)
			self._buf.clear()
		# stdout flush is optional
		if self.cfg.console and self.cfg.console_flush:
			sys.stdout.flush()

	def _atexit_flush_close(self):
		# Best-effort finalization, nothing left to report to at exit
		try:
			self.shutdown()
		except OSError:
			pass

	@property
	def fd(self):
		if self._fd is None:
			# Create the Path if doesnt exist
			os.makedirs(self.cfg.path, exist_ok=True)
			# Open file once
			# O_APPEND ensures correct append semantics even across processes
			flags = os.O_APPEND | os.O_CREAT | os.O_WRONLY
			# Windows
			if hasattr(os, "O_BINARY"):
				flags |= os.O_BINARY
			self._fd = os.open(self.f_path, flags, 0o644)
		return self._fd

	def __enter__(self):
		return self

	def __exit__(self, exc_type, exc, tb):
		self.shutdown()
