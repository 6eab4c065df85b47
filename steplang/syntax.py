"""
The abstract syntax of steplang programs.
Whatever builds programs (a parser, a test, a demo) calls these constructors directly.
Nodes are immutable and own their sub-trees; nothing is shared and nothing is cyclic.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Type(Enum):
	""" Declared kinds. The evaluator ignores them; the static checker does not. """
	INTEGER = "integer"
	REAL = "real"
	STRING = "string"
	BOOLEAN = "boolean"
	
	def __str__(self): return self.value

###############################################################################

class Expression:
	pass

class Constant(Expression):
	""" The four fully-reduced kinds of value. Evaluation always ends at one of these (or a Function). """
	value: Union[int, float, str, bool]

@dataclass(frozen=True)
class Integer(Constant):
	value: int

@dataclass(frozen=True)
class Real(Constant):
	value: float

@dataclass(frozen=True)
class String(Constant):
	value: str

@dataclass(frozen=True)
class Boolean(Constant):
	value: bool

TRUE = Boolean(True)
FALSE = Boolean(False)

@dataclass(frozen=True)
class BinaryExp(Expression):
	lhs: Expression
	rhs: Expression
	glyph = "?"

class Arithmetic(BinaryExp): pass

class Add(Arithmetic): glyph = "+"
class Sub(Arithmetic): glyph = "-"
class Mul(Arithmetic): glyph = "*"
class Div(Arithmetic): glyph = "/"

class Logical(BinaryExp): pass

class And(Logical): glyph = "and"
class Or(Logical): glyph = "or"

@dataclass(frozen=True)
class Not(Expression):
	arg: Expression
	glyph = "not"

class Relational(BinaryExp): pass

class EQ(Relational): glyph = "=="
class GT(Relational): glyph = ">"
class LT(Relational): glyph = "<"
class GTE(Relational): glyph = ">="
class LTE(Relational): glyph = "<="

@dataclass(frozen=True)
class Var(Expression):
	name: str

@dataclass(frozen=True)
class FuncCall(Expression):
	name: str
	args: tuple[Expression, ...] = ()

@dataclass(frozen=True)
class ReadFile(Expression):
	path: Expression

# Console input. These parse and type-check, but have no evaluation rule.
@dataclass(frozen=True)
class ReadString(Expression): pass

@dataclass(frozen=True)
class ReadInt(Expression): pass

@dataclass(frozen=True)
class ReadFloat(Expression): pass

###############################################################################

class Statement:
	pass

@dataclass(frozen=True)
class Assignment(Statement):
	name: str
	value: Expression
	kind: Optional[Type] = None

@dataclass(frozen=True)
class IfThenElse(Statement):
	cond: Expression
	then: Statement
	otherwise: Optional[Statement] = None

@dataclass(frozen=True)
class While(Statement):
	cond: Expression
	body: Statement

@dataclass(frozen=True)
class Sequence(Statement):
	first: Statement
	second: Statement

@dataclass(frozen=True)
class Function:
	name: str
	kind: Optional[Type] = None
	params: Optional[tuple[tuple[str, Type], ...]] = None
	body: Optional[Statement] = None
	
	def param_names(self) -> list[str]:
		return [name for name, _ in self.params or ()]
	
	def is_stub(self): return self.body is None

@dataclass(frozen=True)
class FuncDef(Statement):
	function: Function

@dataclass(frozen=True)
class Return(Statement):
	value: Expression

@dataclass(frozen=True)
class WriteToFile(Statement):
	path: Expression
	content: Expression

@dataclass(frozen=True)
class Print(Statement):
	value: Expression

def sequence(first:Statement, *rest:Statement) -> Statement:
	""" Fold statements into right-leaning Sequence nodes, the way hand-built programs nest them. """
	if not rest: return first
	return Sequence(first, sequence(*rest))
