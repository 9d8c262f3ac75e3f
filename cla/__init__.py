"""cla - terminal calendar renderer.

Renders one or more month grids side by side in the terminal, laid out in a
responsive grid that adapts to the terminal width.
"""

__version__ = "0.2.0"
__author__ = "cla contributors"
__description__ = "Terminal calendar renderer with multi-column month layout"

# Package metadata
__all__ = [
    "__author__",
    "__description__",
    "__version__",
]
