"""
rendercli - render bundled Jinja2 templates from the command line

Loads a template shipped with the package, renders it against a fixed sample
context and prints the result. A benchmark command repeats the render in a
loop and reports the elapsed wall-clock time.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
