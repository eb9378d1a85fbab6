# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

from functools import cmp_to_key
from typing import Any, Callable

from .equality import Equality, LooseEquality
from .errors import IncomparableElementsError

_loose = LooseEquality()

def _index_of(items:list, element:Any, equality:Equality = _loose) -> int|None:
	'''
	Position of the first element equal to `element`, or `None` if there is none.

	>>> _index_of([5, "6", 7], 6)
	1
	>>> _index_of([5, 6, 7], 8) is None
	True
	'''

	for i, el in enumerate(items):
		if equality.equals(el, element):
			return i
	return None

def _contains(items:list, element:Any, equality:Equality = _loose) -> bool:
	return _index_of(items, element, equality) is not None

def _compact_in_place(items:list, keep:Callable[[int, Any], Any]) -> int:
	'''
	Removes from `items` every element for which `keep(index, element)` is false, preserving the order of the rest. `index` is the element's position before any removal. Returns the number of removed elements.

	Kept elements are moved down to a write cursor that trails the read cursor, so no element is skipped and each one is moved at most once. If `keep` raises, the elements already visited are compacted and the rest are left in place.

	>>> items = [1, 2, 2, 3, 2]
	>>> _compact_in_place(items, lambda i, el: el != 2)
	3
	>>> items
	[1, 3]
	>>> items = ["a", "b", "c", "d"]
	>>> _compact_in_place(items, lambda i, el: i % 2)
	2
	>>> items
	['b', 'd']
	'''

	end = len(items)
	write = read = 0
	try:
		while read < end:
			el = items[read]
			if keep(read, el):
				items[write] = el
				write += 1
			read += 1
	finally:
		del items[write:read]
	return read - write

def _unique(items:list, equality:Equality = _loose) -> list:
	'''
	The first occurrence of every distinct element, in order. Each element is compared against everything kept so far, so this takes O(n²) comparisons but never needs elements to be hashable or orderable.

	>>> _unique([3, 1, 3, 2])
	[3, 1, 2]
	>>> _unique([1, "1", [2], [2]])
	[1, [2]]
	'''

	unique : list = []
	for el in items:
		if not _contains(unique, el, equality):
			unique.append(el)
	return unique

def _dedupe_adjacent(items:list, equality:Equality = _loose) -> int:
	'''
	Removes each element equal to the last kept element before it. On sorted input this leaves one element per run of equal elements. Returns the number of removed elements.

	>>> items = [1, 1, 2, 3, 3, 3, 1]
	>>> _dedupe_adjacent(items)
	3
	>>> items
	[1, 2, 3, 1]
	'''

	if not items:
		return 0
	end = len(items)
	write = read = 1
	try:
		while read < end:
			el = items[read]
			if not equality.equals(items[write - 1], el):
				items[write] = el
				write += 1
			read += 1
	finally:
		del items[write:read]
	return read - write

def _sort_in_place(items:list, comparison:Callable[[Any, Any], int]|None = None, *, key:Callable[[Any], Any]|None = None, reverse:bool = False, by_string_form:bool = False) -> None:
	'''
	Sorts `items` with a three-way `comparison` function (negative, zero, or positive for less than, equal, or greater than), or a `key` function, or else the natural order of the elements.

	When the natural order fails on mixed types, `by_string_form` sorts by `str()` of each element instead, so that e.g. `1` and `"1"` end up next to each other. Without it, `IncomparableElementsError` is raised.

	>>> items = [3, 1, 2]
	>>> _sort_in_place(items, lambda a, b: b - a)
	>>> items
	[3, 2, 1]
	>>> items = ["b", 2, "a", 1]
	>>> _sort_in_place(items, by_string_form=True)
	>>> items
	[1, 2, 'a', 'b']
	>>> _sort_in_place([1, "a"])
	Traceback (most recent call last):
	...
	arraykit.errors.IncomparableElementsError: Elements cannot be ordered without a comparison function: '<' not supported between instances of 'str' and 'int'
	'''

	if comparison is not None and key is not None:
		raise TypeError("Only one of 'comparison' and 'key' may be given")
	if comparison is not None:
		key = cmp_to_key(comparison)
	try:
		items.sort(key=key, reverse=reverse)
	except TypeError as e:
		if comparison is not None or key is not None:
			raise
		if not by_string_form:
			raise IncomparableElementsError(f"Elements cannot be ordered without a comparison function: {e}") from e
		items.sort(key=str, reverse=reverse)
