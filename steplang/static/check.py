"""
A static plausibility check for statements, before running them.

The checker walks the same trees the tree-walker does, but with types in
place of values. Problems go on a Report; the checker carries on after each
one so that a single pass finds as much as it reasonably can. Expressions
that already earned a complaint come out as UNKNOWN, which quietly satisfies
everything downstream instead of setting off a cascade.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from .. import syntax
from ..syntax import Type
from ..diagnostics import Report
from .domain import FunctionType, UNKNOWN, NUMERIC, STATIC_TYPE, TYPE_ENV

LITERAL_TYPE = {
	syntax.Integer: Type.INTEGER,
	syntax.Real: Type.REAL,
	syntax.String: Type.STRING,
	syntax.Boolean: Type.BOOLEAN,
}

class TypeChecker(Visitor):
	_returns: list[tuple[str, Optional[Type]]]
	
	def __init__(self, report: Report):
		self._report = report
		self._returns = []
	
	def check_stmt(self, stmt:syntax.Statement, env:TYPE_ENV) -> TYPE_ENV:
		return self.visit(stmt, env.copy())
	
	def check_expr(self, expr:syntax.Expression, env:TYPE_ENV) -> STATIC_TYPE:
		return self.visit(expr, env)
	
	def _expect(self, expr:syntax.Expression, env:TYPE_ENV, need:Type, where:str) -> STATIC_TYPE:
		got = self.check_expr(expr, env)
		if got is not UNKNOWN and got != need:
			self._report.bad_type(where, need, got)
			return UNKNOWN
		return got
	
	def _both(self, expr:syntax.BinaryExp, env:TYPE_ENV, acceptable, need:str):
		a = self.check_expr(expr.lhs, env)
		b = self.check_expr(expr.rhs, env)
		if a is UNKNOWN or b is UNKNOWN: return None
		for t in a, b:
			if t not in acceptable:
				self._report.bad_type("an operand of (%s)" % expr.glyph, need, t)
				return None
		return a, b
	
	# Expressions
	
	@staticmethod
	def visit_Constant(expr:syntax.Constant, env:TYPE_ENV) -> STATIC_TYPE:
		return LITERAL_TYPE[type(expr)]
	
	def visit_Var(self, expr:syntax.Var, env:TYPE_ENV) -> STATIC_TYPE:
		typ = env.find_anywhere(expr.name)
		if typ is None:
			self._report.undefined_name(expr.name)
			return UNKNOWN
		return typ
	
	def visit_Arithmetic(self, expr:syntax.Arithmetic, env:TYPE_ENV) -> STATIC_TYPE:
		pair = self._both(expr, env, NUMERIC, "a number")
		if pair is None: return UNKNOWN
		return Type.INTEGER if pair == (Type.INTEGER, Type.INTEGER) else Type.REAL
	
	def visit_Relational(self, expr:syntax.Relational, env:TYPE_ENV) -> STATIC_TYPE:
		pair = self._both(expr, env, NUMERIC, "a number")
		return UNKNOWN if pair is None else Type.BOOLEAN
	
	def visit_Logical(self, expr:syntax.Logical, env:TYPE_ENV) -> STATIC_TYPE:
		pair = self._both(expr, env, (Type.BOOLEAN,), Type.BOOLEAN)
		return UNKNOWN if pair is None else Type.BOOLEAN
	
	def visit_Not(self, expr:syntax.Not, env:TYPE_ENV) -> STATIC_TYPE:
		return self._expect(expr.arg, env, Type.BOOLEAN, "the operand of (not)")
	
	def visit_FuncCall(self, expr:syntax.FuncCall, env:TYPE_ENV) -> STATIC_TYPE:
		callee = env.find_anywhere(expr.name)
		arg_types = [self.check_expr(a, env) for a in expr.args]
		if callee is None:
			self._report.undefined_name(expr.name)
			return UNKNOWN
		if callee is UNKNOWN: return UNKNOWN
		if not isinstance(callee, FunctionType):
			self._report.not_callable(expr.name, callee)
			return UNKNOWN
		if len(callee.params) != len(arg_types):
			self._report.wrong_arity(expr.name, len(callee.params), len(arg_types))
			return UNKNOWN
		for i, (need, got) in enumerate(zip(callee.params, arg_types), 1):
			if got is not UNKNOWN and got != need:
				self._report.bad_type("argument %d of %s" % (i, expr.name), need, got)
		return UNKNOWN if callee.result is None else callee.result
	
	def visit_ReadFile(self, expr:syntax.ReadFile, env:TYPE_ENV) -> STATIC_TYPE:
		self._expect(expr.path, env, Type.STRING, "the path given to read_file")
		return Type.STRING
	
	@staticmethod
	def visit_ReadString(expr, env): return Type.STRING
	@staticmethod
	def visit_ReadInt(expr, env): return Type.INTEGER
	@staticmethod
	def visit_ReadFloat(expr, env): return Type.REAL
	
	# Statements
	
	def visit_Assignment(self, stmt:syntax.Assignment, env:TYPE_ENV) -> TYPE_ENV:
		got = self.check_expr(stmt.value, env)
		if stmt.kind is not None and got is not UNKNOWN and got != stmt.kind:
			self._report.bad_type("the value assigned to %s" % stmt.name, stmt.kind, got)
		typ = stmt.kind or got
		frame = env.current_frame()
		if frame.holds(stmt.name):
			before = frame.fetch(stmt.name)
			if UNKNOWN not in (before, typ) and before != typ:
				self._report.redeclared(stmt.name, before, typ)
				return env
		env.declare(stmt.name, typ)
		return env
	
	def visit_IfThenElse(self, stmt:syntax.IfThenElse, env:TYPE_ENV) -> TYPE_ENV:
		self._expect(stmt.cond, env, Type.BOOLEAN, "the condition of if")
		then_env = self.check_stmt(stmt.then, env)
		if stmt.otherwise is None: return env
		else_env = self.check_stmt(stmt.otherwise, env)
		# Whatever both branches define alike is defined afterward.
		then_frame, else_frame = then_env.current_frame(), else_env.current_frame()
		for name in then_env.local_names() & else_env.local_names():
			typ = then_frame.fetch(name)
			if typ == else_frame.fetch(name): env.declare(name, typ)
		return env
	
	def visit_While(self, stmt:syntax.While, env:TYPE_ENV) -> TYPE_ENV:
		self._expect(stmt.cond, env, Type.BOOLEAN, "the condition of while")
		self.check_stmt(stmt.body, env)
		return env
	
	def visit_Sequence(self, stmt:syntax.Sequence, env:TYPE_ENV) -> TYPE_ENV:
		return self.check_stmt(stmt.second, self.check_stmt(stmt.first, env))
	
	def visit_FuncDef(self, stmt:syntax.FuncDef, env:TYPE_ENV) -> TYPE_ENV:
		fn = stmt.function
		params = fn.params or ()
		env.declare(fn.name, FunctionType(fn.kind, tuple(t for _, t in params)))
		if fn.body is not None:
			inner = env.copy()
			inner.push_frame(fn.name)
			for name, typ in params: inner.declare(name, typ)
			self._returns.append((fn.name, fn.kind))
			try: self.check_stmt(fn.body, inner)
			finally: self._returns.pop()
		return env
	
	def visit_Return(self, stmt:syntax.Return, env:TYPE_ENV) -> TYPE_ENV:
		got = self.check_expr(stmt.value, env)
		if self._returns:
			name, need = self._returns[-1]
			if need is not None and got is not UNKNOWN and got != need:
				self._report.bad_result(name, need, got)
		return env
	
	def visit_WriteToFile(self, stmt:syntax.WriteToFile, env:TYPE_ENV) -> TYPE_ENV:
		self._expect(stmt.path, env, Type.STRING, "the path given to write_to_file")
		self._expect(stmt.content, env, Type.STRING, "the content given to write_to_file")
		return env
	
	def visit_Print(self, stmt:syntax.Print, env:TYPE_ENV) -> TYPE_ENV:
		got = self.check_expr(stmt.value, env)
		if isinstance(got, FunctionType): self._report.cannot_print(got)
		return env

def check_stmt(stmt:syntax.Statement, type_env:TYPE_ENV, report:Report) -> TYPE_ENV:
	""" Check one statement; the answer is the type environment that follows it. Issues land on the report. """
	return TypeChecker(report).check_stmt(stmt, type_env)
