"""
Run gibo as a module.

Usage:
    python -m gibo dump Python macOS
"""

from .main import main

if __name__ == "__main__":
    main()
