from pathlib import Path
from typing import Union, Optional, Sequence
from dataclasses import dataclass, field

from omegaconf import OmegaConf, DictConfig


@dataclass
class FormatterSection:
	# ABSOLUTE | DATE | ISO8601
	name: str = "ABSOLUTE"
	# snapshot | unsynchronized
	cache_mode: str = "snapshot"


@dataclass
class LoggerSection:
	path: str = "logs"
	level: str = "info"
	console: bool = True
	console_flush: bool = False
	# 0 writes every line straight to the file
	buf_threshold: int = 0
	lock: bool = False


@dataclass
class ConfigStruct:
	formatter: FormatterSection = field(default_factory=FormatterSection)
	logger: LoggerSection = field(default_factory=LoggerSection)


class Config(ConfigStruct):
	def __init__(self, path: Union[str, Path, None] = None, *, resolve: bool = True, overrides: Optional[Sequence[str]] = None):
		# Typed defaults [every key has a value even without a file]
		self.cfg: DictConfig = OmegaConf.structured(ConfigStruct)
		# Files are shared with the host app so foreign keys are allowed
			# typed nodes only accept them when their own struct flag is False
		OmegaConf.set_struct(self.cfg, False)
		for k in self.cfg.keys():
			OmegaConf.set_struct(self.cfg[k], False)

		# Default Path is optional, an explicit one must exist
		if path is None:
			path = Path("config.yaml")
			if path.exists():
				self.cfg = OmegaConf.merge(self.cfg, OmegaConf.load(path))
		else:
			path = Path(path)
			if not path.exists():
				raise FileNotFoundError(f"Config file not found: {path}")
			self.cfg = OmegaConf.merge(self.cfg, OmegaConf.load(path))

		# Dot-list overrides e.g. ["formatter.cache_mode=unsynchronized"]
		if overrides:
			self.cfg = OmegaConf.merge(self.cfg, OmegaConf.from_dotlist(list(overrides)))

		# Resolve interpolations immediately
			# if False: interpolations stay lazy until accessed/converted
		if resolve:
			OmegaConf.resolve(self.cfg)

		# Expose top-level keys directly on the object
		for k in self.cfg.keys():
			setattr(self, k, self.cfg[k])

	def as_dict(self):
		# Return a plain dict with interpolations resolved
		return OmegaConf.to_container(self.cfg, resolve=True)

	def as_yaml(self):
		# Return YAML string
		return OmegaConf.to_yaml(self.cfg, resolve=True)

	def __getitem__(self, item):
		return getattr(self, item)
