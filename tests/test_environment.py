import unittest
from steplang.environment import Environment
from steplang.errors import UndefinedNameError
from steplang.syntax import Integer, String

class EnvironmentTests(unittest.TestCase):
	
	def setUp(self) -> None:
		self.env = Environment()
	
	def test_declare_then_resolve(self):
		self.env.declare("x", Integer(42))
		self.assertEqual(Integer(42), self.env.resolve("x"))
		self.assertEqual(Integer(42), self.env.find_anywhere("x"))
	
	def test_redeclare_overwrites(self):
		self.env.declare("x", Integer(1))
		self.env.declare("x", String("one"))
		self.assertEqual(String("one"), self.env.resolve("x"))
	
	def test_undefined(self):
		with self.assertRaises(UndefinedNameError) as cm:
			self.env.resolve("nope")
		self.assertEqual("nope", cm.exception.name)
		self.assertIsNone(self.env.find_anywhere("nope"))
	
	def test_inner_frame_sees_outward_and_shadows(self):
		self.env.declare("x", Integer(1))
		self.env.declare("y", Integer(2))
		self.env.push_frame("f")
		self.env.declare("x", Integer(10))
		self.assertEqual(Integer(10), self.env.resolve("x"))
		self.assertEqual(Integer(2), self.env.resolve("y"))
		self.env.pop_frame()
		self.assertEqual(Integer(1), self.env.resolve("x"))
	
	def test_pop_forgets_the_frame(self):
		self.env.push_frame("f")
		self.env.declare("local", Integer(3))
		self.env.pop_frame()
		self.assertIsNone(self.env.find_anywhere("local"))
	
	def test_root_cannot_be_popped(self):
		with self.assertRaises(ValueError):
			self.env.pop_frame()
	
	def test_copies_are_independent(self):
		self.env.declare("x", Integer(1))
		twin = self.env.copy()
		twin.declare("x", Integer(2))
		twin.declare("y", Integer(3))
		twin.push_frame("g")
		self.assertEqual(Integer(1), self.env.resolve("x"))
		self.assertIsNone(self.env.find_anywhere("y"))
		self.assertEqual(0, self.env.depth())
		self.assertEqual(1, twin.depth())
	
	def test_trace_names_the_active_calls(self):
		self.env.push_frame("outer")
		self.env.push_frame("inner")
		self.assertEqual(["inner", "outer"], self.env.trace())
		self.assertEqual(2, self.env.depth())
	
	def test_handles_are_unique(self):
		first = self.env.push_frame("a")
		self.env.pop_frame()
		second = self.env.push_frame("b")
		self.assertNotEqual(first, second)
		self.assertEqual(second, self.env.scope_key())

if __name__ == '__main__':
	unittest.main()
