"""
Window, drawing and command-line glue around the core engine.
"""
