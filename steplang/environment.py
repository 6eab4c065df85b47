"""
Scopes as an arena of frames addressed by integer handles.

Each frame knows its parent by handle, so "the current frame" is just an int
that gets copied around. Frames themselves never change once built: a
declaration replaces the current frame in the arena with an extended copy.
That makes `Environment.copy()` cheap (it copies the table of handles, not
the bindings) and lets each execution step own its snapshot outright.

The same machinery backs the run-time environment (names to values) and the
static type environment (names to types).
"""
from typing import Generic, Iterator, Optional, TypeVar
from .errors import UndefinedNameError

ROOT = 0

T = TypeVar("T")

class Frame(Generic[T]):
	""" One scope's bindings, plus the handle of the enclosing scope (None only at the root). """
	__slots__ = ("key", "parent", "breadcrumb", "_bindings")
	
	def __init__(self, key:int, parent:Optional[int], breadcrumb=None, bindings:Optional[dict[str, T]]=None):
		self.key = key
		self.parent = parent
		self.breadcrumb = breadcrumb
		self._bindings = bindings if bindings is not None else {}
	
	def __repr__(self):
		return "<Frame %d of %s: %s>" % (self.key, self.parent, sorted(self._bindings))
	
	def holds(self, name:str) -> bool: return name in self._bindings
	def fetch(self, name:str) -> T: return self._bindings[name]
	def names(self): return self._bindings.keys()
	
	def with_binding(self, name:str, value:T) -> "Frame[T]":
		bindings = dict(self._bindings)
		bindings[name] = value
		return Frame(self.key, self.parent, self.breadcrumb, bindings)


class Environment(Generic[T]):
	_frames: dict[int, Frame[T]]
	_current: int
	_next_key: int
	
	def __init__(self):
		self._frames = {ROOT: Frame(ROOT, None)}
		self._current = ROOT
		self._next_key = ROOT + 1
	
	def copy(self) -> "Environment[T]":
		twin = object.__new__(type(self))
		twin._frames = dict(self._frames)
		twin._current = self._current
		twin._next_key = self._next_key
		return twin
	
	def scope_key(self) -> int: return self._current
	
	def current_frame(self) -> Frame[T]: return self._frames[self._current]
	
	def declare(self, name:str, value:T) -> None:
		""" Bind (or re-bind) a name in the current frame only. """
		self._frames[self._current] = self.current_frame().with_binding(name, value)
	
	def push_frame(self, breadcrumb=None) -> int:
		"""
		Open a new frame whose parent is the current frame, and make it current.
		The breadcrumb (normally the function being called) only serves for tracing.
		"""
		key = self._next_key
		self._next_key += 1
		self._frames[key] = Frame(key, self._current, breadcrumb)
		self._current = key
		return key
	
	def pop_frame(self) -> None:
		frame = self.current_frame()
		if frame.parent is None:
			raise ValueError("The root frame cannot be popped.")
		del self._frames[frame.key]
		self._current = frame.parent
	
	def chain(self) -> Iterator[Frame[T]]:
		""" The scope chain, from the current frame out to the root. """
		key = self._current
		while key is not None:
			frame = self._frames[key]
			yield frame
			key = frame.parent
	
	def find_anywhere(self, name:str) -> Optional[T]:
		""" Like resolve, but answers None instead of complaining. """
		for frame in self.chain():
			if frame.holds(name):
				return frame.fetch(name)
		return None
	
	def resolve(self, name:str) -> T:
		for frame in self.chain():
			if frame.holds(name):
				return frame.fetch(name)
		raise UndefinedNameError(name)
	
	def local_names(self) -> set[str]:
		return set(self.current_frame().names())
	
	def depth(self) -> int:
		""" How many frames have been pushed over the root. """
		return sum(1 for _ in self.chain()) - 1
	
	def trace(self) -> list:
		""" Breadcrumbs of the active calls, innermost first. """
		return [frame.breadcrumb for frame in self.chain() if frame.breadcrumb is not None]
