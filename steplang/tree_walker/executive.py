"""
Run statements.

Every statement gets its own copy of the environment it was handed and
answers with a ControlFlow signal: Continue with the environment that
results, or Return with a value. Sequence and While are where a Return
cuts the remaining work short; the call protocol is where it gets caught.
"""
import sys
import threading
from boozetools.support.foundation import Visitor
from .. import syntax
from ..environment import Environment
from ..errors import OperandTypeError, UnsupportedOperationError
from ..adapters.teletype_adapter import console as default_console
from ..adapters.fs_adapter import filesystem as default_filesystem
from .evaluator import Evaluator
from .values import ENV, VALUE, CONTROL_FLOW, Continue, Return, render

class Executive(Visitor):
	def __init__(self, console=None, filesystem=None):
		self._console = console or default_console
		self._filesystem = filesystem or default_filesystem
		self.evaluator = Evaluator(self, self._filesystem)
	
	def evaluate(self, expr:syntax.Expression, env:ENV) -> VALUE:
		return self.evaluator.evaluate(expr, env)
	
	def execute(self, stmt:syntax.Statement, env:ENV) -> CONTROL_FLOW:
		return self.visit(stmt, env.copy())
	
	def _condition(self, expr:syntax.Expression, env:ENV, where:str) -> bool:
		value = self.evaluate(expr, env)
		if not isinstance(value, syntax.Boolean):
			raise OperandTypeError("The condition of %s must be a boolean." % where)
		return value.value
	
	def visit_Assignment(self, stmt:syntax.Assignment, env:ENV) -> CONTROL_FLOW:
		env.declare(stmt.name, self.evaluate(stmt.value, env))
		return Continue(env)
	
	def visit_IfThenElse(self, stmt:syntax.IfThenElse, env:ENV) -> CONTROL_FLOW:
		if self._condition(stmt.cond, env, "if"): return self.execute(stmt.then, env)
		if stmt.otherwise is not None: return self.execute(stmt.otherwise, env)
		return Continue(env)
	
	def visit_While(self, stmt:syntax.While, env:ENV) -> CONTROL_FLOW:
		while self._condition(stmt.cond, env, "while"):
			outcome = self.execute(stmt.body, env)
			if isinstance(outcome, Return): return outcome
			env = outcome.env
		return Continue(env)
	
	def visit_Sequence(self, stmt:syntax.Sequence, env:ENV) -> CONTROL_FLOW:
		outcome = self.execute(stmt.first, env)
		if isinstance(outcome, Return): return outcome
		return self.execute(stmt.second, outcome.env)
	
	@staticmethod
	def visit_FuncDef(stmt:syntax.FuncDef, env:ENV) -> CONTROL_FLOW:
		env.declare(stmt.function.name, stmt.function)
		return Continue(env)
	
	def visit_Return(self, stmt:syntax.Return, env:ENV) -> CONTROL_FLOW:
		return Return(self.evaluate(stmt.value, env))
	
	def visit_WriteToFile(self, stmt:syntax.WriteToFile, env:ENV) -> CONTROL_FLOW:
		path = self.evaluate(stmt.path, env)
		content = self.evaluate(stmt.content, env)
		if not (isinstance(path, syntax.String) and isinstance(content, syntax.String)):
			raise OperandTypeError("write_to_file expects two string arguments.")
		self._filesystem.write_text(path.value, content.value)
		return Continue(env)
	
	def visit_Print(self, stmt:syntax.Print, env:ENV) -> CONTROL_FLOW:
		value = self.evaluate(stmt.value, env)
		if not isinstance(value, syntax.Constant):
			raise OperandTypeError("Cannot print this type of value.")
		self._console.echo(render(value))
		return Continue(env)
	
	@staticmethod
	def visit_Statement(stmt:syntax.Statement, env:ENV) -> CONTROL_FLOW:
		raise UnsupportedOperationError("There is no way to execute %s yet." % type(stmt).__name__)

###############################################################################

RECURSION_LIMIT = 40_000
STACK_SIZE = 512 * 1024 * 1024

def on_deep_stack(fn, *args):
	"""
	Each call in the language costs about a dozen host frames, so the usual
	host recursion limit stops a program after a few dozen nested calls.
	This runs fn(*args) on a worker thread with a big stack and a matching
	recursion limit, then answers its result or re-raises its exception.
	Runaway recursion still reaches the limit, and the call protocol turns
	that into RecursionTooDeep.
	"""
	outcome = {}
	def work():
		try: outcome["value"] = fn(*args)
		except BaseException as ex: outcome["error"] = ex
	worker = threading.Thread(target=work, name="steplang program")
	old_limit = sys.getrecursionlimit()
	sys.setrecursionlimit(max(old_limit, RECURSION_LIMIT))
	try:
		old_size = threading.stack_size(STACK_SIZE)
		try: worker.start()
		finally: threading.stack_size(old_size)
		worker.join()
	finally:
		sys.setrecursionlimit(old_limit)
	if "error" in outcome: raise outcome["error"]
	return outcome["value"]

def run_program(program:syntax.Statement, console=None, filesystem=None) -> CONTROL_FLOW:
	""" Execute a whole program against a brand-new root environment. """
	return on_deep_stack(Executive(console, filesystem).execute, program, Environment())

def execute(stmt:syntax.Statement, env:ENV) -> CONTROL_FLOW:
	return Executive().execute(stmt, env)

def evaluate(expr:syntax.Expression, env:ENV) -> VALUE:
	return Executive().evaluate(expr, env)
