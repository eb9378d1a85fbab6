# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import re
import logging
import datetime
import unittest

from arraykit import kinds, collection
from arraykit.kinds import Kind, kind_of, kinds_of, is_a

logger = logging.getLogger("arraykit.tests")

class TestKinds(unittest.TestCase):

	def test_kind_of(self):
		self.assertIs(kind_of(None), Kind.NONE)
		self.assertIs(kind_of(False), Kind.BOOLEAN)
		self.assertIs(kind_of(3), Kind.NUMBER)
		self.assertIs(kind_of(2.5), Kind.NUMBER)
		self.assertIs(kind_of("a"), Kind.STRING)
		self.assertIs(kind_of(b"a"), Kind.BYTES)
		self.assertIs(kind_of(collection(1)), Kind.COLLECTION)
		self.assertIs(kind_of([1]), Kind.SEQUENCE)
		self.assertIs(kind_of((1,)), Kind.SEQUENCE)
		self.assertIs(kind_of(range(2)), Kind.SEQUENCE)
		self.assertIs(kind_of(iter([1])), Kind.SEQUENCE)
		self.assertIs(kind_of({"a": 1}), Kind.MAPPING)
		self.assertIs(kind_of({1}), Kind.SET)
		self.assertIs(kind_of(frozenset()), Kind.SET)
		self.assertIs(kind_of(re.compile("x")), Kind.PATTERN)
		self.assertIs(kind_of(datetime.date(2020, 1, 1)), Kind.DATE)
		self.assertIs(kind_of(len), Kind.FUNCTION)
		self.assertIs(kind_of(lambda: None), Kind.FUNCTION)
		self.assertIs(kind_of(object()), Kind.OBJECT)

	def test_kinds_of_is_ordered(self):
		self.assertEqual(list(kinds_of(collection())), [Kind.COLLECTION, Kind.SEQUENCE, Kind.OBJECT])
		self.assertEqual(list(kinds_of(True)), [Kind.BOOLEAN, Kind.NUMBER, Kind.OBJECT])
		self.assertEqual(list(kinds_of("a")), [Kind.STRING, Kind.OBJECT])
		self.assertEqual(list(kinds_of(None)), [Kind.NONE])

	def test_everything_but_none_is_an_object(self):
		for value in (0, "", [], {}, set(), object(), len, collection()):
			self.assertTrue(is_a(value, Kind.OBJECT))
		self.assertFalse(is_a(None, Kind.OBJECT))

	def test_is_a(self):
		self.assertTrue(is_a([], "Sequence"))
		self.assertTrue(is_a([], "sequence"))
		self.assertTrue(is_a(collection(), Kind.SEQUENCE))
		self.assertFalse(is_a("abc", Kind.SEQUENCE))
		self.assertTrue(is_a(True, "number"))
		with self.assertRaises(ValueError):
			is_a([], "array")
		with self.assertRaises(TypeError):
			is_a([], 6)

	def test_lookup(self):
		self.assertIs(Kind.lookup("string"), Kind.STRING)
		self.assertIs(Kind.lookup(Kind.SET), Kind.SET)
