# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import logging
import unittest

from arraykit import equality, collection
from arraykit.equality import LooseEquality, StrictEquality, IdentityEquality, KeyEquality, resolve_equality

logger = logging.getLogger("arraykit.tests")

class TestLooseEquality(unittest.TestCase):

	def setUp(self):
		self.eq = LooseEquality()

	def test_strings_and_numbers(self):
		self.assertTrue(self.eq.equals("1", 1))
		self.assertTrue(self.eq.equals(1, "1"))
		self.assertTrue(self.eq.equals("1.5", 1.5))
		self.assertTrue(self.eq.equals(" 3 ", 3))
		self.assertTrue(self.eq.equals("", 0))
		self.assertFalse(self.eq.equals("one", 1))
		self.assertFalse(self.eq.equals("1", 2))

	def test_strings_are_compared_as_strings(self):
		self.assertTrue(self.eq.equals("a", "a"))
		self.assertFalse(self.eq.equals("1", "1.0"))
		self.assertFalse(self.eq.equals("a", "A"))

	def test_booleans(self):
		self.assertTrue(self.eq.equals(True, 1))
		self.assertTrue(self.eq.equals(False, 0))
		self.assertTrue(self.eq.equals(True, "1"))
		self.assertFalse(self.eq.equals(True, 2))
		self.assertFalse(self.eq.equals(True, "true"))

	def test_none(self):
		self.assertTrue(self.eq.equals(None, None))
		self.assertFalse(self.eq.equals(None, 0))
		self.assertFalse(self.eq.equals("", None))
		self.assertFalse(self.eq.equals(None, False))

	def test_other_values(self):
		self.assertTrue(self.eq.equals([1, 2], [1, 2]))
		self.assertFalse(self.eq.equals([1, 2], (1, 2)))
		self.assertTrue(self.eq.equals({"a": 1}, {"a": 1}))

	def test_failing_comparison_is_unequal(self):
		class Bad:
			def __eq__(self, other):
				raise RuntimeError("no")
		self.assertFalse(self.eq.equals(Bad(), 1))

class TestOtherPolicies(unittest.TestCase):

	def test_strict(self):
		eq = StrictEquality()
		self.assertTrue(eq.equals(1, 1))
		self.assertTrue(eq.equals("a", "a"))
		self.assertFalse(eq.equals(1, 1.0))
		self.assertFalse(eq.equals(1, True))
		self.assertFalse(eq.equals("1", 1))

	def test_identity(self):
		eq = IdentityEquality()
		a = [1]
		self.assertTrue(eq.equals(a, a))
		self.assertFalse(eq.equals(a, [1]))

	def test_key(self):
		eq = KeyEquality(str.lower)
		self.assertTrue(eq.equals("Foo", "fOO"))
		self.assertFalse(eq.equals("Foo", "bar"))
		with self.assertRaises(TypeError):
			KeyEquality("lower")

class TestResolve(unittest.TestCase):

	def test_names(self):
		self.assertIsInstance(resolve_equality("loose"), LooseEquality)
		self.assertIsInstance(resolve_equality("Strict"), StrictEquality)
		self.assertIsInstance(resolve_equality("IDENTITY"), IdentityEquality)
		with self.assertRaises(ValueError):
			resolve_equality("fuzzy")

	def test_policy_and_callable(self):
		policy = KeyEquality(abs)
		self.assertIs(resolve_equality(policy), policy)
		wrapped = resolve_equality(lambda a, b: a % 10 == b % 10)
		self.assertIsInstance(wrapped, equality.Equality)
		self.assertTrue(wrapped.equals(13, 3))

	def test_bad_type(self):
		with self.assertRaises(TypeError):
			resolve_equality(3.5)

class TestPolicyInCollections(unittest.TestCase):

	def test_membership_operations_follow_policy(self):
		loose  = collection("1", 1, 1.0, "a")
		strict = collection("1", 1, 1.0, "a", equality="strict")
		self.assertEqual(loose.count(1), 3)
		self.assertEqual(strict.count(1), 1)
		self.assertEqual(loose.remove(1).to_list(), ["a"])
		self.assertEqual(strict.remove(1).to_list(), ["1", 1.0, "a"])
		self.assertEqual(loose.dif(["1"]).to_list(), ["a"])
		self.assertEqual(strict.dif(["1"]).to_list(), [1, 1.0, "a"])
		self.assertEqual(strict.cut([1.0]).to_list(), [1.0])
		self.assertEqual(strict.index(1.0), 2)
		self.assertIsNone(strict.index(2))

	def test_case_insensitive_collection(self):
		c = collection("Apple apple BANANA banana cherry", equality=KeyEquality(str.lower))
		self.assertEqual(c.uniq().to_list(), ["Apple", "BANANA", "cherry"])
		self.assertEqual(c.fast_uniq(key=str.lower).to_list(), ["Apple", "BANANA", "cherry"])
		self.assertTrue(c.contains("CHERRY"))
		self.assertEqual(c.replace("apple", "pear").to_list(), ["pear", "pear", "BANANA", "banana", "cherry"])

	def test_identity_collection(self):
		a, b = [1], [1]
		c = collection(a, b, a, equality="identity")
		self.assertEqual(len(c.uniq()), 2)
		self.assertEqual(c.index(b), 1)
		self.assertEqual(c.count([1]), 0)
