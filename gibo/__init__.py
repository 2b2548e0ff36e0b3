"""
gibo — .gitignore boilerplates from a local mirror of github/gitignore.
"""

__version__ = "3.0.0"
