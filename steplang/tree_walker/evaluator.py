"""
Reduce expressions to values.

Operands are evaluated left before right, and always both of them:
`and` and `or` do not short-circuit. Arithmetic happens in floating point;
when both operands were integers the result is truncated back to a 32-bit
integer. Relations are defined only for numbers.
"""
import operator
from boozetools.support.foundation import Visitor
from .. import syntax
from ..errors import (
	Trouble, NotAFunctionError, ArityMismatch, MissingReturnError,
	OperandTypeError, UnsupportedOperationError, RecursionTooDeep,
)
from ..adapters.fs_adapter import filesystem as default_filesystem
from .values import VALUE, ENV, Return, to_i32, ieee_divide

ARITHMETIC = {
	"+" : operator.add,
	"-" : operator.sub,
	"*" : operator.mul,
	"/" : ieee_divide,
}
ARITHMETIC_NAME = {
	"+" : "addition",
	"-" : "subtraction",
	"*" : "multiplication",
	"/" : "division",
}
RELATIONAL = {
	"==" : operator.eq,
	">"  : operator.gt,
	"<"  : operator.lt,
	">=" : operator.ge,
	"<=" : operator.le,
}
LOGICAL = {
	"and" : operator.and_,
	"or"  : operator.or_,
}

def _flag(it:bool) -> syntax.Boolean:
	return syntax.TRUE if it else syntax.FALSE

def _is_number(v:VALUE): return isinstance(v, (syntax.Integer, syntax.Real))
def _is_boolean(v:VALUE): return isinstance(v, syntax.Boolean)

def _as_float(v:syntax.Constant) -> float:
	try: return float(v.value)
	except OverflowError:
		raise OperandTypeError("The number %d is too big to do arithmetic with." % v.value) from None


class Evaluator(Visitor):
	"""
	Function calls need to run statements, so an evaluator is always
	paired with the executive that runs function bodies.
	"""
	
	def __init__(self, executive, filesystem=None):
		self._executive = executive
		self._filesystem = filesystem or default_filesystem
	
	def evaluate(self, expr:syntax.Expression, env:ENV) -> VALUE:
		return self.visit(expr, env)
	
	def _operands(self, expr:syntax.BinaryExp, env:ENV, predicate, complaint:str):
		a = self.evaluate(expr.lhs, env)
		b = self.evaluate(expr.rhs, env)
		if predicate(a) and predicate(b): return a, b
		raise OperandTypeError(complaint)
	
	@staticmethod
	def visit_Constant(expr:syntax.Constant, env:ENV) -> VALUE:
		return expr
	
	@staticmethod
	def visit_Var(expr:syntax.Var, env:ENV) -> VALUE:
		return env.resolve(expr.name)
	
	def visit_Arithmetic(self, expr:syntax.Arithmetic, env:ENV) -> VALUE:
		glyph = expr.glyph
		complaint = "%s '(%s)' is only defined for numbers (integers and real)." % (ARITHMETIC_NAME[glyph], glyph)
		a, b = self._operands(expr, env, _is_number, complaint)
		result = ARITHMETIC[glyph](_as_float(a), _as_float(b))
		if isinstance(a, syntax.Integer) and isinstance(b, syntax.Integer):
			return syntax.Integer(to_i32(result))
		return syntax.Real(result)
	
	def visit_Relational(self, expr:syntax.Relational, env:ENV) -> VALUE:
		complaint = "(%s) is only defined for numbers (integers and real)." % expr.glyph
		a, b = self._operands(expr, env, _is_number, complaint)
		return _flag(RELATIONAL[expr.glyph](_as_float(a), _as_float(b)))
	
	def visit_Logical(self, expr:syntax.Logical, env:ENV) -> VALUE:
		complaint = "'%s' is only defined for booleans." % expr.glyph
		a, b = self._operands(expr, env, _is_boolean, complaint)
		return _flag(LOGICAL[expr.glyph](a.value, b.value))
	
	def visit_Not(self, expr:syntax.Not, env:ENV) -> VALUE:
		a = self.evaluate(expr.arg, env)
		if not _is_boolean(a): raise OperandTypeError("'not' is only defined for booleans.")
		return _flag(not a.value)
	
	def visit_FuncCall(self, expr:syntax.FuncCall, env:ENV) -> VALUE:
		target = env.resolve(expr.name)
		if not isinstance(target, syntax.Function): raise NotAFunctionError(expr.name)
		args = [self.evaluate(a, env) for a in expr.args]
		return self.apply(target, args, env)
	
	def apply(self, function:syntax.Function, args:list[VALUE], env:ENV) -> VALUE:
		"""
		The call protocol: a fresh frame parented at the caller's current frame,
		parameters bound in order, the function's own name bound too unless the
		caller can already see it, and then the body must end by returning.
		"""
		params = function.param_names()
		if len(params) != len(args): raise ArityMismatch(function.name, len(params), len(args))
		if function.is_stub():
			raise UnsupportedOperationError("%s is only declared; there is no body to call." % function.name)
		inner = env.copy()
		inner.push_frame(function.name)
		for name, value in zip(params, args): inner.declare(name, value)
		if inner.find_anywhere(function.name) is None:
			inner.declare(function.name, function)
		try:
			outcome = self._executive.execute(function.body, inner)
		except RecursionError:
			raise RecursionTooDeep(function.name) from None
		except Trouble as ex:
			ex.passed_through(function.name)
			raise
		if not isinstance(outcome, Return):
			raise MissingReturnError(function.name)
		inner.pop_frame()
		return outcome.value
	
	def visit_ReadFile(self, expr:syntax.ReadFile, env:ENV) -> VALUE:
		path = self.evaluate(expr.path, env)
		if not isinstance(path, syntax.String):
			raise OperandTypeError("read_file expects a string as the file path.")
		return syntax.String(self._filesystem.read_text(path.value))
	
	@staticmethod
	def visit_Expression(expr:syntax.Expression, env:ENV) -> VALUE:
		# ReadString, ReadInt, ReadFloat, and anything else without a rule.
		raise UnsupportedOperationError("There is no way to evaluate %s yet." % type(expr).__name__)
