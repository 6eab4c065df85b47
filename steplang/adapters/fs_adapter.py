from ..errors import IOFailure

class FileSystem:
	@staticmethod
	def read_text(path:str) -> str:
		try:
			with open(path, "r", encoding="utf-8") as fh: return fh.read()
		except (OSError, UnicodeError) as ex:
			raise IOFailure(path, ex) from ex
	
	@staticmethod
	def write_text(path:str, content:str) -> None:
		try:
			with open(path, "w", encoding="utf-8") as fh: fh.write(content)
		except (OSError, UnicodeError) as ex:
			raise IOFailure(path, ex) from ex

filesystem = FileSystem()
