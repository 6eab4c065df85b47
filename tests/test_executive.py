import tempfile
import unittest
from pathlib import Path
from unittest import mock
from steplang.syntax import (
	Type, Integer, Real, String, TRUE, FALSE, Add, Sub, Mul, Div, EQ, GT, LT, LTE,
	Var, FuncCall, ReadFile, Assignment, IfThenElse, While, Sequence, Return,
	Function, FuncDef, WriteToFile, Print, sequence,
)
from steplang.environment import Environment
from steplang.errors import OperandTypeError, IOFailure, UndefinedNameError
from steplang.tree_walker.executive import Executive, execute, run_program
from steplang.tree_walker.values import Continue, Return as ReturnSignal
from steplang import demos

class ExecutiveTestCase(unittest.TestCase):
	def setUp(self) -> None:
		self.console = mock.Mock()
		self.executive = Executive(console=self.console)
	
	def run_ok(self, program) -> Environment:
		outcome = self.executive.execute(program, Environment())
		self.assertIsInstance(outcome, Continue)
		return outcome.env
	
	def printed(self):
		return [c.args[0] for c in self.console.echo.call_args_list]

class Statements(ExecutiveTestCase):
	
	def test_assignment(self):
		env = self.run_ok(Assignment("x", Integer(42), Type.INTEGER))
		self.assertEqual(Integer(42), env.find_anywhere("x"))
	
	def test_copy_forward(self):
		before = Environment()
		before.declare("x", Integer(1))
		outcome = execute(Assignment("x", Integer(2)), before)
		self.assertEqual(Integer(1), before.resolve("x"))
		self.assertEqual(Integer(2), outcome.env.resolve("x"))
	
	def test_complex_sequence(self):
		env = self.run_ok(sequence(
			Assignment("x", Integer(5), Type.INTEGER),
			Assignment("y", Integer(0), Type.INTEGER),
			Assignment("z", Add(Mul(Integer(2), Var("x")), Integer(3)), Type.INTEGER),
		))
		self.assertEqual([Integer(5), Integer(0), Integer(13)], [env.find_anywhere(n) for n in "xyz"])
	
	def test_summation(self):
		env = self.run_ok(sequence(
			Assignment("x", Integer(10), Type.INTEGER),
			Assignment("y", Integer(0), Type.INTEGER),
			While(GT(Var("x"), Integer(0)), Sequence(
				Assignment("y", Add(Var("y"), Var("x"))),
				Assignment("x", Sub(Var("x"), Integer(1))),
			)),
		))
		self.assertEqual(Integer(55), env.find_anywhere("y"))
		self.assertEqual(Integer(0), env.find_anywhere("x"))
	
	def test_simple_if_then_else(self):
		env = self.run_ok(sequence(
			Assignment("x", Integer(10), Type.INTEGER),
			IfThenElse(
				GT(Var("x"), Integer(5)),
				Assignment("y", Integer(1), Type.INTEGER),
				Assignment("y", Integer(0), Type.INTEGER),
			),
		))
		self.assertEqual(Integer(1), env.find_anywhere("y"))
	
	def test_nested_conditionals(self):
		env = self.run_ok(sequence(
			Assignment("x", Integer(1), Type.INTEGER),
			Assignment("y", Integer(0), Type.INTEGER),
			IfThenElse(
				EQ(Var("x"), Var("y")),
				Assignment("y", Integer(1)),
				Sequence(
					Assignment("y", Integer(2)),
					IfThenElse(LT(Var("x"), Integer(0)), Assignment("y", Integer(5))),
				),
			),
		))
		self.assertEqual(Integer(2), env.find_anywhere("y"))
	
	def test_if_without_else_is_a_no_op(self):
		env = self.run_ok(IfThenElse(FALSE, Assignment("y", Integer(1))))
		self.assertIsNone(env.find_anywhere("y"))
	
	def test_conditions_must_be_boolean(self):
		for stmt in IfThenElse(Integer(1), Print(Integer(1))), While(String("yes"), Print(Integer(1))):
			with self.subTest(stmt):
				with self.assertRaises(OperandTypeError):
					self.executive.execute(stmt, Environment())
		self.console.echo.assert_not_called()
	
	def test_errors_propagate(self):
		with self.assertRaises(UndefinedNameError):
			self.executive.execute(sequence(Print(Var("ghost")), Print(Integer(1))), Environment())
		self.console.echo.assert_not_called()

class EarlyReturn(ExecutiveTestCase):
	
	def test_sequence_short_circuits(self):
		outcome = self.executive.execute(Sequence(Return(Integer(1)), Print(Integer(2))), Environment())
		self.assertEqual(ReturnSignal(Integer(1)), outcome)
		self.console.echo.assert_not_called()
	
	def test_return_escapes_a_loop(self):
		program = sequence(
			Assignment("i", Integer(0)),
			While(TRUE, sequence(
				Assignment("i", Add(Var("i"), Integer(1))),
				IfThenElse(EQ(Var("i"), Integer(3)), Return(Var("i"))),
			)),
			Print(String("unreachable")),
		)
		outcome = self.executive.execute(program, Environment())
		self.assertIsInstance(outcome, ReturnSignal)
		self.assertEqual(Integer(3), outcome.value)
		self.console.echo.assert_not_called()
	
	def test_recursive_function(self):
		n = Var("n")
		def f(arg): return FuncCall("fibonacci", (arg,))
		function = Function("fibonacci", Type.INTEGER, (("n", Type.INTEGER),), sequence(
			IfThenElse(LT(n, Integer(1)), Return(Integer(0))),
			IfThenElse(LTE(n, Integer(2)), Return(Sub(n, Integer(1)))),
			Return(Add(f(Sub(n, Integer(1))), f(Sub(n, Integer(2))))),
		))
		env = self.run_ok(Sequence(
			FuncDef(function),
			Assignment("fib", f(Integer(10)), Type.INTEGER),
		))
		self.assertEqual(Integer(34), env.find_anywhere("fib"))
		self.assertEqual(function, env.find_anywhere("fibonacci"))
	
	def test_function_body_declarations_stay_inside(self):
		function = Function("f", Type.INTEGER, (), sequence(
			Assignment("scratch", Integer(9)),
			Return(Var("scratch")),
		))
		env = self.run_ok(sequence(FuncDef(function), Assignment("r", FuncCall("f"))))
		self.assertEqual(Integer(9), env.find_anywhere("r"))
		self.assertIsNone(env.find_anywhere("scratch"))

class Output(ExecutiveTestCase):
	
	def test_print_renders_each_kind(self):
		self.run_ok(sequence(
			Print(Integer(55)),
			Print(Add(Integer(10), Real(20.5))),
			Print(Real(210.0)),
			Print(String("hello, world!")),
			Print(TRUE),
			Print(FALSE),
			Print(Integer(-3)),
		))
		self.assertEqual(["55", "30.5", "210", "hello, world!", "true", "false", "-3"], self.printed())
	
	def test_reals_print_without_exponents(self):
		self.run_ok(sequence(
			Print(Real(0.00001)),
			Print(Real(1.5e-7)),
			Print(Real(123456789012.375)),
			Print(Real(1e16)),
			Print(Div(Real(1.0), Real(0.0))),
		))
		self.assertEqual(["0.00001", "0.00000015", "123456789012.375", "10000000000000000", "inf"], self.printed())
	
	def test_cannot_print_a_function(self):
		program = Sequence(FuncDef(Function("f")), Print(Var("f")))
		with self.assertRaises(OperandTypeError) as cm:
			self.executive.execute(program, Environment())
		self.assertIn("Cannot print", str(cm.exception))
	
	def test_print_goes_to_stdout_by_default(self):
		with mock.patch("sys.stdout") as stdout:
			run_program(Print(Integer(7)))
		stdout.write.assert_called_once_with("7\n")
	
	def test_write_then_read(self):
		with tempfile.TemporaryDirectory() as folder:
			path = String(str(Path(folder) / "out.txt"))
			text = "teste de escrita\nsecond line"
			env = self.run_ok(sequence(
				WriteToFile(path, String(text)),
				Assignment("back", ReadFile(path), Type.STRING),
			))
			self.assertEqual(String(text), env.find_anywhere("back"))
	
	def test_write_truncates(self):
		with tempfile.TemporaryDirectory() as folder:
			path = Path(folder) / "out.txt"
			path.write_text("a much longer piece of text", encoding="utf-8")
			self.run_ok(WriteToFile(String(str(path)), String("short")))
			self.assertEqual("short", path.read_text(encoding="utf-8"))
	
	def test_write_wants_strings(self):
		with self.assertRaises(OperandTypeError):
			self.executive.execute(WriteToFile(String("x.txt"), Integer(1)), Environment())
	
	def test_write_failure(self):
		with tempfile.TemporaryDirectory() as folder:
			path = String(str(Path(folder) / "no" / "such" / "dir.txt"))
			with self.assertRaises(IOFailure):
				self.executive.execute(WriteToFile(path, String("x")), Environment())
	
	def test_substitute_filesystem(self):
		fs = mock.Mock()
		fs.read_text.return_value = "canned"
		executive = Executive(console=self.console, filesystem=fs)
		outcome = executive.execute(demos.read_file("anything.txt"), Environment())
		fs.read_text.assert_called_once_with("anything.txt")
		self.assertEqual(String("canned"), outcome.env.find_anywhere("fileContents"))
		self.assertEqual(["canned"], self.printed())

class Demos(ExecutiveTestCase):
	
	def test_demos_that_print(self):
		for name, expect in [("summation", ["55"]), ("fibonacci", ["34"]), ("print", ["5.25"])]:
			with self.subTest(name):
				self.console.reset_mock()
				self.run_ok(demos.DEMOS[name]())
				self.assertEqual(expect, self.printed())

if __name__ == '__main__':
	unittest.main()
