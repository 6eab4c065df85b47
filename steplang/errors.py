"""
Things that go wrong while a program runs.

The core is fail-fast: the first Trouble propagates straight out to whoever
called `execute` or `evaluate`. On the way out of each function call, the
call protocol notes the function's name in `call_trace` so the report can say
how the program got there.
"""

class Trouble(Exception):
	""" Root of run-time failures. """
	def __init__(self, message:str):
		super().__init__(message)
		self.message = message
		self.call_trace = []
	
	def passed_through(self, breadcrumb:str):
		self.call_trace.append(breadcrumb)
	
	def __str__(self): return self.message

class UndefinedNameError(Trouble):
	def __init__(self, name:str):
		super().__init__("%r is not defined anywhere in scope." % name)
		self.name = name

class NotAFunctionError(Trouble):
	def __init__(self, name:str):
		super().__init__("%r is not a function, so it cannot be called." % name)
		self.name = name

class ArityMismatch(Trouble):
	def __init__(self, name:str, need:int, got:int):
		plural = '' if need == 1 else 's'
		super().__init__("%s takes %d argument%s, but got %d instead." % (name, need, plural, got))
		self.name, self.need, self.got = name, need, got

class MissingReturnError(Trouble):
	def __init__(self, name:str):
		super().__init__("%s finished without returning a value." % name)
		self.name = name

class OperandTypeError(Trouble):
	""" An operator or statement met an operand of the wrong kind. """

class UnsupportedOperationError(Trouble):
	""" Valid syntax with no evaluation rule. """

class IOFailure(Trouble):
	def __init__(self, path, cause:Exception):
		super().__init__("%s: %s" % (path, cause))
		self.path = path
		self.cause = cause

class RecursionTooDeep(Trouble):
	def __init__(self, name:str):
		super().__init__("Calls to %s nested too deeply for the host to follow." % name)
		self.name = name
