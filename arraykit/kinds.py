# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import re
import datetime
from enum import Enum
from numbers import Number
from collections.abc import Iterator, Mapping, Sequence, Set
from typing import Any

from ordered_set import OrderedSet

class Kind(Enum):
	'''The closed set of capabilities an element can be classified under.'''

	NONE       = 0
	BOOLEAN    = 1
	NUMBER     = 2
	STRING     = 3
	BYTES      = 4
	COLLECTION = 5
	SEQUENCE   = 6
	MAPPING    = 7
	SET        = 8
	PATTERN    = 9
	DATE       = 10
	FUNCTION   = 11
	OBJECT     = 12

	@classmethod
	def lookup(cls, name:"Kind|str") -> "Kind":
		'''
		>>> Kind.lookup("sequence")
		<Kind.SEQUENCE: 6>
		'''

		if isinstance(name, Kind):
			return name
		if not isinstance(name, str):
			raise TypeError(f"Bad type for 'kind' (expected {Kind} or {str}): {name}")
		try:
			return cls[name.upper()]
		except KeyError:
			raise ValueError(f"Unknown kind: {name!r}") from None

def _is_collection(value:Any) -> bool:
	# imported here to avoid a circular import with .core
	from .core import Collection
	return isinstance(value, Collection)

def kinds_of(value:Any) -> OrderedSet[Kind]:
	'''
	Every capability of `value`, from the most specific to the most general. Every value except `None` is an `OBJECT`.

	>>> list(kinds_of([1, 2]))
	[<Kind.SEQUENCE: 6>, <Kind.OBJECT: 12>]
	>>> list(kinds_of(True))
	[<Kind.BOOLEAN: 1>, <Kind.NUMBER: 2>, <Kind.OBJECT: 12>]
	>>> list(kinds_of(re.compile("a+")))
	[<Kind.PATTERN: 9>, <Kind.OBJECT: 12>]
	>>> list(kinds_of(None))
	[<Kind.NONE: 0>]
	'''

	if value is None:
		return OrderedSet([Kind.NONE])

	kinds : OrderedSet[Kind] = OrderedSet()
	if isinstance(value, bool):
		kinds.add(Kind.BOOLEAN)
		kinds.add(Kind.NUMBER)
	elif isinstance(value, Number):
		kinds.add(Kind.NUMBER)
	elif isinstance(value, str):
		kinds.add(Kind.STRING)
	elif isinstance(value, (bytes, bytearray, memoryview)):
		kinds.add(Kind.BYTES)
	elif _is_collection(value):
		kinds.add(Kind.COLLECTION)
		kinds.add(Kind.SEQUENCE)
	elif isinstance(value, (Sequence, Iterator)):
		kinds.add(Kind.SEQUENCE)
	elif isinstance(value, Mapping):
		kinds.add(Kind.MAPPING)
	elif isinstance(value, Set):
		kinds.add(Kind.SET)
	elif isinstance(value, re.Pattern):
		kinds.add(Kind.PATTERN)
	elif isinstance(value, (datetime.date, datetime.time)):
		kinds.add(Kind.DATE)
	elif callable(value):
		kinds.add(Kind.FUNCTION)
	kinds.add(Kind.OBJECT)
	return kinds

def kind_of(value:Any) -> Kind:
	'''
	The most specific capability of `value`.

	>>> kind_of("a b"), kind_of(3.5), kind_of({}), kind_of(object())
	(<Kind.STRING: 3>, <Kind.NUMBER: 2>, <Kind.MAPPING: 7>, <Kind.OBJECT: 12>)
	'''

	return kinds_of(value)[0]

def is_a(value:Any, kind:Kind|str) -> bool:
	'''
	Whether `value` has the capability `kind`.

	>>> is_a([], "Sequence"), is_a([], Kind.OBJECT), is_a([], "string")
	(True, True, False)
	'''

	return Kind.lookup(kind) in kinds_of(value)
