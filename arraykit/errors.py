# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

class InvalidArgumentError(ValueError):
	'''Indicates an operation was called without the arguments it needs (e.g., `insert_()` with no elements).'''
	pass

class IndexOutOfRangeError(IndexError):
	'''Indicates an index outside of `0 <= index < length` while `strict_indices` is enabled.'''
	def __init__(self, index=None, length=None):
		self.index  = index
		self.length = length
		super().__init__(f"Index {index} is out of range for a collection of length {length}")

class IncomparableElementsError(TypeError):
	'''Indicates the elements of a collection cannot be put in their natural order without a comparison function.'''
	pass
