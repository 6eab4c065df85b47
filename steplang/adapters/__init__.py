"""
The world outside the interpreter: files and the console.
The tree-walker reaches these only through the objects defined here,
so tests (or a host program) can substitute their own.
"""
