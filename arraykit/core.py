# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import functools
from typing import Any, Callable, Iterable, Iterator

from .config import _CollectionConfig, default_config
from .helpers import _index_of, _contains, _compact_in_place, _unique, _dedupe_adjacent, _sort_in_place
from .errors import InvalidArgumentError, IndexOutOfRangeError
from .kinds import Kind, kind_of
from .log import _count_noun

def _apply_to_copy(method:Callable) -> Callable:
	'''Derive the copying form of an in-place operation: the operation runs on a copy, which is returned, and the receiver is left alone.'''

	@functools.wraps(method)
	def copying(self, *args, **kwargs):
		copy = self.copy()
		method(copy, *args, **kwargs)
		return copy

	copying.__name__ = method.__name__.rstrip("_")
	copying.__qualname__ = method.__qualname__.rstrip("_")
	copying.__doc__ = f"Copying form of `{method.__name__}()`: returns a new collection and leaves this one unchanged."
	return copying

class Collection:
	'''
	An ordered, index-addressable sequence of elements.

	Structural operations come in two forms. The in-place form, whose name ends with an underscore (e.g. `filter_()`), changes this collection and returns it for chaining. The copying form (e.g. `filter()`) leaves this collection unchanged and returns a new, independent collection.

	Comparisons between elements (membership, dedup, set algebra, counting) use the collection's equality policy, loose by default (see `arraykit.equality`).

	>>> c = collection(1, 5, 7, 8, 9)
	>>> c.filter(lambda i, el: el > 5)
	Collection([7, 8, 9])
	>>> c.reverse_().first()
	9
	>>> print(c.values_at(0, 2, 3))
	[9, 7, 5]
	'''

	__hash__ = None # type: ignore [assignment]

	def __init__(self, elements:Iterable = (), *, config:_CollectionConfig|None = None):
		self._items  : list = list(elements)
		self._config : _CollectionConfig = config or default_config()

	# -------------------------------------------------------------------------
	# Python protocols

	def __len__(self) -> int:
		return len(self._items)

	def __iter__(self) -> Iterator:
		# live, like each(): re-reads the length on every step
		i = 0
		while i < len(self._items):
			yield self._items[i]
			i += 1

	def __contains__(self, element:Any) -> bool:
		return self.contains(element)

	def __getitem__(self, index):
		if isinstance(index, slice):
			return Collection(self._items[index], config=self._config)
		return self._items[index]

	def __setitem__(self, index, value) -> None:
		if isinstance(index, slice):
			value = list(value)
		self._items[index] = value

	def __eq__(self, other:Any) -> bool:
		if isinstance(other, Collection):
			return self._items == other._items
		if isinstance(other, list):
			return self._items == other
		return NotImplemented

	def __repr__(self) -> str:
		elements = ", ".join(repr(x) for x in self._items)
		return f"Collection([{elements}])"

	def __str__(self) -> str:
		return "[" + ", ".join(str(x) for x in self._items) + "]"

	@property
	def length(self) -> int:
		return len(self._items)

	@property
	def config(self) -> _CollectionConfig:
		return self._config

	@property
	def equality(self):
		return self._config.equality

	# -------------------------------------------------------------------------
	# Iterating

	def each(self, block:Callable[[int, Any], Any]) -> "Collection":
		'''
		Calls `block(index, element)` for each element, by ascending index. The length and the element are read again on every step, so a `block` that changes this collection changes what it visits next.

		>>> seen = []
		>>> collection("a b c").each(lambda i, el: seen.append(f"{i}{el}")) is not None
		True
		>>> seen
		['0a', '1b', '2c']
		'''

		i = 0
		while i < len(self._items):
			block(i, self._items[i])
			i += 1
		return self

	def collect_(self, block:Callable[[int, Any], Any]) -> "Collection":
		'''
		Replaces each element with `block(index, element)`.

		>>> collection(1, 5, 6).collect(lambda i, el: el * 2)
		Collection([2, 10, 12])
		'''

		items = self._items
		def assign(i, el):
			items[i] = block(i, el)
		return self.each(assign)

	collect = _apply_to_copy(collect_)
	map_    = collect_
	map     = collect

	# -------------------------------------------------------------------------
	# Filtering

	def filter_(self, block:Callable[[int, Any], Any]) -> "Collection":
		'''
		Keeps only the elements for which `block(index, element)` is true, preserving their order. `index` is the element's position when the call started.

		>>> c = collection(1, 5, 6, 7)
		>>> c.filter_(lambda i, el: el > 5) is c
		True
		>>> c
		Collection([6, 7])
		'''

		before = len(self._items)
		removed = _compact_in_place(self._items, block)
		self._config.logger.debug(f"filter_: removed {_count_noun(removed)} of {before}")
		return self

	filter  = _apply_to_copy(filter_)
	select_ = filter_
	select  = filter

	def reject_(self, block:Callable[[int, Any], Any]) -> "Collection":
		'''Removes the elements for which `block(index, element)` is true. The opposite of `filter_()`.'''

		return self.filter_(lambda i, el: not block(i, el))

	reject = _apply_to_copy(reject_)

	def compact_(self) -> "Collection":
		'''
		Removes every `None` element.

		>>> collection(0, None, "", None, False).compact()
		Collection([0, '', False])
		'''

		return self.filter_(lambda i, el: el is not None)

	compact = _apply_to_copy(compact_)

	def remove_(self, element:Any) -> "Collection":
		'''
		Removes every element equal to `element`.

		>>> collection(1, "2", 3, 2).remove(2)
		Collection([1, 3])
		'''

		equals = self._config.equality.equals
		return self.filter_(lambda i, el: not equals(el, element))

	remove = _apply_to_copy(remove_)

	def delete_at_(self, index:int) -> "Collection":
		'''
		Removes the element at `index`. An index outside of `0 <= index < length` is ignored, unless `strict_indices` is set.

		>>> collection("a b c").delete_at(1)
		Collection(['a', 'c'])
		>>> collection("a b c").delete_at(3)
		Collection(['a', 'b', 'c'])
		'''

		if self._in_range(index):
			del self._items[index]
			self._config.logger.debug(f"delete_at_: removed element at {index}")
		return self

	delete_at  = _apply_to_copy(delete_at_)
	remove_at_ = delete_at_
	remove_at  = delete_at

	# -------------------------------------------------------------------------
	# Dedup

	def uniq_(self) -> "Collection":
		'''
		Removes every element equal to an earlier one. The first occurrences keep their order. Takes O(n²) comparisons.

		>>> collection(3, 1, 3, 2).uniq_()
		Collection([3, 1, 2])
		'''

		unique = _unique(self._items, self._config.equality)
		removed = len(self._items) - len(unique)
		self.clear()
		self._items.extend(unique)
		self._config.logger.debug(f"uniq_: removed {_count_noun(removed)}")
		return self

	def uniq(self) -> "Collection":
		'''Copying form of `uniq_()`: returns a new collection and leaves this one unchanged.'''

		return Collection(_unique(self._items, self._config.equality), config=self._config)

	def fast_uniq_(self, comparison:Callable[[Any, Any], int]|None = None, *, key:Callable[[Any], Any]|None = None) -> "Collection":
		'''
		Sorts this collection, then removes every element equal to its predecessor. Takes O(n log n) time, but unlike `uniq_()` the original order is lost: the result is in sorted order.

		`comparison` is an optional three-way comparison function (negative, zero, or positive for less than, equal, or greater than). Without it (or `key`), elements are put in their natural order, or ordered by their string form when their types cannot be compared, so `1` and `"1"` still meet.

		>>> collection(3, 1, 3, 2).fast_uniq()
		Collection([1, 2, 3])
		>>> collection("b", "c", "a", "c").fast_uniq(lambda x, y: (x < y) - (x > y))
		Collection(['c', 'b', 'a'])
		'''

		_sort_in_place(self._items, comparison, key=key, by_string_form=True)
		removed = _dedupe_adjacent(self._items, self._config.equality)
		self._config.logger.debug(f"fast_uniq_: removed {_count_noun(removed)}")
		return self

	fast_uniq = _apply_to_copy(fast_uniq_)

	# -------------------------------------------------------------------------
	# Working with other collections

	def dif_(self, other:Any) -> "Collection":
		'''
		Removes every element that is also in `other` (the difference). `other` is read the way `collection()` reads a single argument.

		>>> collection(1, 2, 3).dif([2])
		Collection([1, 3])
		>>> collection("a b c a").dif("a")
		Collection(['b', 'c'])
		'''

		others = collection(other).to_list()
		equality = self._config.equality
		return self.filter_(lambda i, el: not _contains(others, el, equality))

	dif = _apply_to_copy(dif_)

	def cut_(self, other:Any) -> "Collection":
		'''
		Keeps only the elements that are also in `other` (the intersection).

		Duplicates are not removed from either side first, so this takes O(n*m) comparisons and `collection(1, 1, 2).cut([1])` is `[1, 1]`. Chain `uniq_()` to drop them.

		>>> collection(1, 2, 3).cut([2, 3, 4])
		Collection([2, 3])
		'''

		others = collection(other).to_list()
		equality = self._config.equality
		return self.filter_(lambda i, el: _contains(others, el, equality))

	cut = _apply_to_copy(cut_)

	def concat_(self, other:Any) -> "Collection":
		'''
		Appends the elements of `other` to the end of this collection.

		>>> a, b = collection(5, 9), collection(8, 7)
		>>> a.concat(b), a, b
		(Collection([5, 9, 8, 7]), Collection([5, 9]), Collection([8, 7]))
		'''

		# snapshot first; `other` may be this collection
		others = collection(other).to_list()
		self._items.extend(others)
		self._config.logger.debug(f"concat_: added {_count_noun(len(others))}")
		return self

	def concat(self, other:Any) -> "Collection":
		'''Copying form of `concat_()`: returns a new collection containing this collection's elements, then those of `other`.'''

		return Collection(self._items + collection(other).to_list(), config=self._config)

	cat_ = concat_
	cat  = concat

	# -------------------------------------------------------------------------
	# Single element manipulation

	def insert_(self, index:int, *elements:Any) -> "Collection":
		'''
		Inserts `elements` before `index`, moving the elements from `index` onwards up. An `index` past the end appends; a negative `index` counts from the end.

		>>> collection(1, 4).insert_(1, 2, 3)
		Collection([1, 2, 3, 4])
		>>> collection(1).insert_(0)
		Traceback (most recent call last):
		...
		arraykit.errors.InvalidArgumentError: Please specify index and element(s) to insert.
		'''

		if not elements:
			raise InvalidArgumentError("Please specify index and element(s) to insert.")
		if not isinstance(index, int):
			raise TypeError(f"Bad type for 'index' (expected {int}): {index}")
		self._items[index:index] = elements
		self._config.logger.debug(f"insert_: added {_count_noun(len(elements))} at {index}")
		return self

	insert = _apply_to_copy(insert_)

	def replace_(self, target:Any, replacement:Any) -> "Collection":
		'''
		Replaces every element equal to `target` with `replacement`.

		>>> collection("a b a").replace_("a", "z")
		Collection(['z', 'b', 'z'])
		'''

		equals = self._config.equality.equals
		items = self._items
		for i, el in enumerate(items):
			if equals(el, target):
				items[i] = replacement
		return self

	replace = _apply_to_copy(replace_)

	def reverse_(self) -> "Collection":
		self._items.reverse()
		return self

	reverse = _apply_to_copy(reverse_)

	def sort_(self, comparison:Callable[[Any, Any], int]|None = None, *, key:Callable[[Any], Any]|None = None, reverse:bool = False) -> "Collection":
		'''Sorts this collection by a three-way `comparison` function, a `key`, or the natural order of its elements. The sort is stable.'''

		_sort_in_place(self._items, comparison, key=key, reverse=reverse)
		return self

	sort = _apply_to_copy(sort_)

	def push(self, *elements:Any) -> "Collection":
		self._items.extend(elements)
		return self

	def pop(self) -> Any:
		'''Removes and returns the last element, or `None` if this collection is empty.'''

		return self._items.pop() if self._items else None

	def shift(self) -> Any:
		'''Removes and returns the first element, or `None` if this collection is empty.'''

		return self._items.pop(0) if self._items else None

	def unshift(self, *elements:Any) -> "Collection":
		self._items[0:0] = elements
		return self

	def slice(self, start:int|None = None, stop:int|None = None) -> "Collection":
		return Collection(self._items[start:stop], config=self._config)

	def clear(self) -> "Collection":
		'''Removes every element from this collection. There is no copying form: use `collection()` for a new, empty one.'''

		self._items.clear()
		return self

	empty = clear

	# -------------------------------------------------------------------------
	# Access & inspection

	def _in_range(self, index:Any) -> bool:
		if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(self._items):
			return True
		if self._config.strict_indices:
			raise IndexOutOfRangeError(index, len(self._items))
		return False

	def contains(self, element:Any) -> bool:
		return _contains(self._items, element, self._config.equality)

	def index(self, element:Any) -> int|None:
		'''
		The position of the first element equal to `element`, or `None` if there is none (never -1).

		>>> collection("a b c").index("c"), collection("a b c").index("d")
		(2, None)
		'''

		return _index_of(self._items, element, self._config.equality)

	def count(self, element:Any) -> int:
		'''
		The number of elements equal to `element`.

		>>> collection(1, "1", 2, 1.0).count(1)
		3
		'''

		equals = self._config.equality.equals
		return len(self.filter(lambda i, el: equals(el, element)))

	def item(self, index:int) -> Any:
		'''The element at `index`, or `None` if `index` is outside of `0 <= index < length` (unless `strict_indices` is set).'''

		return self._items[index] if self._in_range(index) else None

	def first(self) -> Any:
		return self._items[0] if self._items else None

	def last(self) -> Any:
		return self._items[-1] if self._items else None

	def values_at(self, *indices:int) -> "Collection":
		'''
		A new collection of the elements at `indices`, in the order given. Indices may repeat. Out of range indices give `None` (unless `strict_indices` is set).

		>>> collection(1, 5, 7, 8, 9).values_at(0, 2, 3, 0, 10)
		Collection([1, 7, 8, 1, None])
		'''

		return Collection([self.item(i) for i in indices], config=self._config)

	def is_empty(self) -> bool:
		return not self._items

	def size(self) -> int:
		return len(self._items)

	def copy(self) -> "Collection":
		'''A shallow copy: new storage holding the same element objects.'''

		return Collection(self._items, config=self._config)

	def to_list(self) -> list:
		return list(self._items)

	def to_string(self) -> str:
		return str(self)

def collection(*elements:Any, equality:Any = None, strict_indices:bool|None = None) -> Collection:
	'''
	Create a `Collection`.

	- No arguments, or a single `None`, give an empty collection.
	- A single string is split on whitespace, one element per word.
	- A single `Collection` is returned as is (not copied).
	- A single sequence (list, tuple, range, iterator, ...) gives its elements.
	- Any other single value gives a collection of that one element.
	- Two or more arguments give one element per argument, even when an argument is itself a sequence.

	Args
		equality (str|Equality|callable) : Equality policy for the new collection. (Defaults to the one set by `configure()`.)
		strict_indices (bool) : Whether out of range indices raise `IndexOutOfRangeError`. (Defaults to the one set by `configure()`.)

	>>> collection("foo bar  yeah")
	Collection(['foo', 'bar', 'yeah'])
	>>> collection([1, 2]), collection((1, 2), 3), collection(7)
	(Collection([1, 2]), Collection([(1, 2), 3]), Collection([7]))
	>>> collection(None), collection(None, None)
	(Collection([]), Collection([None, None]))
	>>> c = collection()
	>>> collection(c) is c
	True
	'''

	config = default_config().with_options(equality=equality, strict_indices=strict_indices)

	if len(elements) != 1:
		return Collection(elements, config=config)

	value = elements[0]
	kind = kind_of(value)
	if kind is Kind.NONE:
		return Collection((), config=config)
	if kind is Kind.COLLECTION:
		return value
	if kind is Kind.STRING:
		return Collection(value.split(), config=config)
	if kind is Kind.SEQUENCE:
		return Collection(value, config=config)
	config.logger.debug(f"collection: treating {kind.name.lower()} value as a single element")
	return Collection([value], config=config)
