import sys

class Console:
	""" Append-only, line-oriented output. One `echo` per Print statement. """
	def __init__(self, stream=None):
		self._stream = stream
	
	def echo(self, line:str):
		# Resolved late so that patching sys.stdout works.
		stream = self._stream or sys.stdout
		stream.write(line + "\n")
		stream.flush()

console = Console()
