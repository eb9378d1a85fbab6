# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

from .core import Collection, collection
from .config import configure
from .equality import Equality, LooseEquality, StrictEquality, IdentityEquality, KeyEquality
from .kinds import Kind, kind_of, kinds_of, is_a
from .errors import InvalidArgumentError, IndexOutOfRangeError, IncomparableElementsError

__all__ = [
	"Collection",
	"collection",
	"configure",
	"Equality",
	"LooseEquality",
	"StrictEquality",
	"IdentityEquality",
	"KeyEquality",
	"Kind",
	"kind_of",
	"kinds_of",
	"is_a",
	"InvalidArgumentError",
	"IndexOutOfRangeError",
	"IncomparableElementsError",
]
