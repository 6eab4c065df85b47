"""
Collect complaints and show them to a human.

Static problems (from the type checker) accumulate on a Report as they are
found. Run-time Trouble stops the program at once, and the command line
hands it to the same Report so that it looks the same on the console.
"""
import sys
from itertools import groupby
from typing import Any, Sequence

class TooManyIssues(Exception):
	pass

class Pic:
	""" One issue, ready to print: an intro line, some particulars, and maybe a footer. """
	def __init__(self, intro:str, lines:Sequence[str]=(), footer:Sequence[str]=()):
		self.intro, self._lines, self._footer = intro, list(lines), footer
	def also(self, line:str): self._lines.append(line)
	def as_text(self):
		lines = [self.intro]
		lines.extend("    "+line for line in self._lines)
		lines.extend(self._footer)
		return '\n'.join(lines)

class Report:
	_issues : list[Pic]
	
	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._undefined = None
		self._max_issues = max_issues
	
	@property
	def issues(self): return tuple(self._issues)
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(), file=sys.stderr)
		sys.stderr.flush()
	
	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)
	
	# Methods the type checker calls:
	
	def undefined_name(self, name:str):
		if self._undefined is None:
			self._undefined = Pic("I don't see what these refer to:")
			self.issue(self._undefined)
		self._undefined.also(name)
	
	def bad_type(self, where:str, need:Any, got:Any):
		intro = "Type-checking found %s where %s was expected:" % (got, need)
		self.issue(Pic(intro, [where]))
	
	def not_callable(self, name:str, got:Any):
		self.issue(Pic("Dunno how to call %s as a function." % (name,), ["Found to be %s" % (got,)]))
	
	def wrong_arity(self, name:str, need:int, got:int):
		plural = '' if need == 1 else 's'
		caption = "%s takes %d argument%s, but got %d instead." % (name, need, plural, got)
		self.issue(Pic("Type-checking found a disagreement over arguments.", [caption]))
	
	def redeclared(self, name:str, before:Any, after:Any):
		intro = "%r was %s, but here it would become %s." % (name, before, after)
		self.issue(Pic(intro, footer=["A name keeps its type once it has one."]))
	
	def bad_result(self, name:str, need:Any, got:Any):
		intro = "Type-checking found a problematic result:"
		self.issue(Pic(intro, ["%s declared %s" % (name, need), "but returns %s" % (got,)]))
	
	def cannot_print(self, got:Any):
		self.issue(Pic("Cannot print %s." % (got,)))
	
	# And the one for when the program itself goes wrong:
	
	def runtime_failure(self, trouble):
		intro = "%s: %s" % (type(trouble).__name__, trouble)
		lines = []
		for name, run in groupby(trouble.call_trace):
			count = len(list(run))
			lines.append("in %s" % name if count == 1 else "in %s (%d calls deep)" % (name, count))
		self.issue(Pic(intro, lines))
