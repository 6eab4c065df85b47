"""
steplang: the dynamic semantics of a small imperative language.
Build programs with `steplang.syntax`, check them with `steplang.static.check`
if you like, and run them with `steplang.tree_walker.executive`.
"""
