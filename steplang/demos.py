"""
Fixed programs, built directly as syntax trees (there is no parser here).
The command line runs these by name.
"""
from .syntax import (
	Type, Integer, Real, String, Var, Add, Sub, LT, LTE, GT, FuncCall, ReadFile,
	ReadString, ReadInt, ReadFloat, Assignment, IfThenElse, While, Return,
	Function, FuncDef, WriteToFile, Print, sequence,
)

DEFAULT_PATH = "output.txt"

def read_file(path=DEFAULT_PATH):
	""" Read a whole file into a variable, then print it. """
	return sequence(
		Assignment("fileContents", ReadFile(String(path)), Type.STRING),
		Print(Var("fileContents")),
	)

def write_file(path=DEFAULT_PATH):
	""" Write a fixed line of text to a file. """
	return WriteToFile(String(path), String("a test of writing"))

def print_sum(path=None):
	""" Print the sum of two reals. """
	return Print(Add(Real(3.15), Real(2.1)))

def read_console(path=None):
	""" Print what comes in on the console. Console input has no evaluation rule, so this one fails. """
	return sequence(
		Print(ReadString()),
		Print(ReadInt()),
		Print(ReadFloat()),
	)

def summation(path=None):
	""" Add up the integers from ten down to one. """
	x, y = Var("x"), Var("y")
	return sequence(
		Assignment("x", Integer(10), Type.INTEGER),
		Assignment("y", Integer(0), Type.INTEGER),
		While(GT(x, Integer(0)), sequence(
			Assignment("y", Add(y, x)),
			Assignment("x", Sub(x, Integer(1))),
		)),
		Print(y),
	)

def fibonacci(path=None):
	""" A recursive function whose base case gives n-1, so f(10) is 34. """
	n = Var("n")
	def f(arg): return FuncCall("fibonacci", (arg,))
	body = sequence(
		IfThenElse(LT(n, Integer(1)), Return(Integer(0))),
		IfThenElse(LTE(n, Integer(2)), Return(Sub(n, Integer(1)))),
		Return(Add(f(Sub(n, Integer(1))), f(Sub(n, Integer(2))))),
	)
	function = Function("fibonacci", Type.INTEGER, (("n", Type.INTEGER),), body)
	return sequence(
		FuncDef(function),
		Assignment("fib", f(Integer(10)), Type.INTEGER),
		Print(Var("fib")),
	)

DEMOS = {
	"read-file": read_file,
	"write-file": write_file,
	"print": print_sum,
	"read-console": read_console,
	"summation": summation,
	"fibonacci": fibonacci,
}
