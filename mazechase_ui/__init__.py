"""
Maze Chase display and input adapters.
"""
