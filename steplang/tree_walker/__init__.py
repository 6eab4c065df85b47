"""
Direct interpretation of the syntax tree: the evaluator reduces expressions,
the executive runs statements, and they meet again at function calls.
"""
