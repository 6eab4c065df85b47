"""
Static checking, done before a program runs (if the caller chooses).
Nothing in the tree-walker depends on anything in here.
"""
