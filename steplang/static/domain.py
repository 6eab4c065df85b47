"""
What the type checker knows about a name or an expression.
Plain values have one of the declared kinds in `syntax.Type`.
"""
from typing import NamedTuple, Optional, Union
from ..syntax import Type
from ..environment import Environment

class FunctionType(NamedTuple):
	result: Optional[Type]
	params: tuple[Type, ...]
	def __str__(self):
		result = "nothing declared" if self.result is None else self.result
		return "function(%s) -> %s" % (", ".join(map(str, self.params)), result)

class Unknown:
	""" The type of something already complained about. Operations on it stay quiet. """
	def __str__(self): return "an unknown type"
	def __repr__(self): return "<UNKNOWN>"

UNKNOWN = Unknown()

NUMERIC = (Type.INTEGER, Type.REAL)

STATIC_TYPE = Union[Type, FunctionType, Unknown]
TYPE_ENV = Environment[STATIC_TYPE]
