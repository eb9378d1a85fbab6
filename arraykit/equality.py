# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

from numbers import Number
from typing import Any, Callable, Protocol, runtime_checkable

@runtime_checkable
class Equality(Protocol):
	'''Protocol class for the policy a `Collection` uses to decide whether two elements are the same.'''

	def equals(self, a:Any, b:Any) -> bool:
		...

def _to_number(val:Any) -> Any:
	'''
	Coerce a string or boolean to a number the way a loose comparison would. Returns `None` if `val` has no numeric reading.

	>>> _to_number(" 42 ")
	42
	>>> _to_number("1.5")
	1.5
	>>> _to_number("")
	0
	>>> _to_number(True)
	1
	>>> _to_number("abc") is None
	True
	'''

	if isinstance(val, bool):
		return int(val)
	if isinstance(val, Number):
		return val
	if isinstance(val, str):
		s = val.strip()
		if not s:
			return 0
		try:
			return int(s)
		except ValueError:
			pass
		try:
			return float(s)
		except ValueError:
			return None
	return None

class LooseEquality:
	'''
	Equality with coercion between strings, numbers, and booleans.

	`None` is only equal to `None`. A string compared with a number or boolean is read as a number first. Everything else falls back to `==`.

	>>> eq = LooseEquality()
	>>> eq.equals("1", 1), eq.equals(True, 1), eq.equals(" 2.0 ", 2)
	(True, True, True)
	>>> eq.equals(None, 0), eq.equals(None, None), eq.equals("a", 1)
	(False, True, False)
	>>> eq.equals("a", "a"), eq.equals("1", "1.0")
	(True, False)
	'''

	def equals(self, a:Any, b:Any) -> bool:
		if a is None or b is None:
			return a is None and b is None
		a_is_str = isinstance(a, str)
		b_is_str = isinstance(b, str)
		if a_is_str != b_is_str and isinstance(b if a_is_str else a, Number):
			a = _to_number(a)
			b = _to_number(b)
			if a is None or b is None:
				return False
		elif isinstance(a, bool) or isinstance(b, bool):
			a = _to_number(a) if isinstance(a, bool) else a
			b = _to_number(b) if isinstance(b, bool) else b
		try:
			return bool(a == b)
		except Exception:
			return False

	def __repr__(self):
		return "LooseEquality()"

class StrictEquality:
	'''
	Equality without coercion: both values must have the same type and compare equal.

	>>> eq = StrictEquality()
	>>> eq.equals(1, 1), eq.equals(1, 1.0), eq.equals("1", 1), eq.equals(True, 1)
	(True, False, False, False)
	'''

	def equals(self, a:Any, b:Any) -> bool:
		if type(a) is not type(b):
			return False
		try:
			return bool(a == b)
		except Exception:
			return False

	def __repr__(self):
		return "StrictEquality()"

class IdentityEquality:
	'''Equality by object identity.'''

	def equals(self, a:Any, b:Any) -> bool:
		return a is b

	def __repr__(self):
		return "IdentityEquality()"

class KeyEquality:
	'''
	Equality of the values returned by `key`.

	>>> KeyEquality(str.lower).equals("Foo", "FOO")
	True
	'''

	def __init__(self, key:Callable[[Any], Any]):
		if not callable(key):
			raise TypeError(f"Bad type for 'key' (expected a callable): {key}")
		self.key = key

	def equals(self, a:Any, b:Any) -> bool:
		return bool(self.key(a) == self.key(b))

	def __repr__(self):
		return f"KeyEquality({self.key!r})"

class _CallableEquality:
	'''Adapts a plain function of two arguments to the `Equality` protocol.'''

	def __init__(self, func:Callable[[Any, Any], Any]):
		self.func = func

	def equals(self, a:Any, b:Any) -> bool:
		return bool(self.func(a, b))

	def __repr__(self):
		return f"_CallableEquality({self.func!r})"

_NAMED_POLICIES = {
	"loose"    : LooseEquality,
	"strict"   : StrictEquality,
	"identity" : IdentityEquality,
}

def resolve_equality(policy:Any) -> Equality:
	'''
	Turn a policy name, an `Equality`, or a function of two arguments into an `Equality`.

	>>> resolve_equality("STRICT")
	StrictEquality()
	>>> resolve_equality("fuzzy")
	Traceback (most recent call last):
	...
	ValueError: Unknown equality policy: 'fuzzy' (expected one of 'loose', 'strict', 'identity')
	'''

	if isinstance(policy, str):
		try:
			return _NAMED_POLICIES[policy.lower()]()
		except KeyError:
			names = ", ".join(repr(name) for name in _NAMED_POLICIES)
			raise ValueError(f"Unknown equality policy: {policy!r} (expected one of {names})") from None
	if isinstance(policy, Equality):
		return policy
	if callable(policy):
		return _CallableEquality(policy)
	raise TypeError(f"Bad type for 'equality' (expected {str}, {Equality.__name__}, or a callable): {policy}")
