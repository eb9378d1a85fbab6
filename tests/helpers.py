# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import logging

class TempLoggingLevel:
	def __init__(self, logger, level):
		self.logger = logger
		self.level = level
	def __enter__(self):
		self.old_level = self.logger.level
		self.logger.setLevel(self.level)
	def __exit__(self, exc_type, exc_val, exc_tb):
		self.logger.setLevel(self.old_level)

class Visits:
	'''Records the `(index, element)` pairs a block is called with, and returns `result(index, element)` from each call.'''
	def __init__(self, result=lambda i, el: True):
		self.result = result
		self.calls  = []
	def __call__(self, i, el):
		self.calls.append((i, el))
		return self.result(i, el)

class Token:
	'''An element with identity but no value equality, to check that copies are shallow.'''
	def __init__(self, name):
		self.name = name
	def __repr__(self):
		return f"Token({self.name!r})"
