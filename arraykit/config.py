# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import logging
from dataclasses import dataclass, replace, fields
from logging import Logger

from .equality import Equality, LooseEquality, resolve_equality
from .log import logger

@dataclass(frozen=True)
class _CollectionConfig:
	'''Read-only options shared by a `Collection` and every collection derived from it.'''

	equality       : Equality
	strict_indices : bool
	logger         : Logger

	def with_options(self, *, equality=None, strict_indices:bool|None = None) -> "_CollectionConfig":
		'''Return a config with the given options overridden. `None` keeps the current value.'''

		changes = {}
		if equality is not None:
			changes["equality"] = resolve_equality(equality)
		if strict_indices is not None:
			if not isinstance(strict_indices, bool):
				raise TypeError(f"Bad type for option 'strict_indices' (expected {bool}): {strict_indices}")
			changes["strict_indices"] = strict_indices
		if not changes:
			return self
		return replace(self, **changes)

_default_config = _CollectionConfig(
	equality       = LooseEquality(),
	strict_indices = False,
	logger         = logger,
)

def default_config() -> _CollectionConfig:
	return _default_config

def configure(**kwargs) -> _CollectionConfig:
	'''
	Change the options used by collections created from now on.

	Args
		equality (str|Equality|callable) : Equality policy for membership tests, dedup, set algebra, and counting. One of "loose", "strict", "identity", an `Equality`, or a function of two arguments. (Defaults to "loose".)
		strict_indices (bool) : Whether out of range indices raise `IndexOutOfRangeError` instead of being ignored. (Defaults to `False`.)
		debug          (bool) : Sets the package logger to DEBUG (or back to INFO).

	Returns
		The new default config.

	>>> configure(strict_indices=True).strict_indices
	True
	>>> configure(strict_indices=False).strict_indices
	False
	>>> configure(colour="red")
	Traceback (most recent call last):
	...
	AttributeError: Collection config has no 'colour' option.
	'''

	global _default_config

	options = {f.name for f in fields(_CollectionConfig)} - {"logger"}
	for key in kwargs:
		if key not in options and key != "debug":
			raise AttributeError(f"Collection config has no '{key}' option.")

	debug = kwargs.pop("debug", None)
	if debug is not None:
		if not isinstance(debug, bool):
			raise TypeError(f"Bad type for option 'debug' (expected {bool}): {debug}")
		logger.setLevel(logging.DEBUG if debug else logging.INFO)

	_default_config = _default_config.with_options(**kwargs)
	return _default_config
