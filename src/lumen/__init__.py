"""
LUMEN - a declarative language for user interfaces.

Compiles LUMEN source into a stylesheet and a markup fragment:

    from lumen import compile_source

    result = compile_source('surface card {\\n  width: 300px\\n}')
    result.css   # '#lm1 { box-sizing: border-box; position: relative; width: 300px }'
    result.html  # '<div id="lm1" class="lumen-surface" data-name="card"></div>'
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .core import ir
from .core.compiler import CompileResult, render
from .core.errors import ConfigError, LumenError, ParseError
from .core.ids import IdGenerator
from .core.lexer import tokenize
from .core.pipeline import compile_file, compile_source

DISTRIBUTION_NAME = "lumen-ui"

try:
    __version__ = version(DISTRIBUTION_NAME)
except PackageNotFoundError:
    # Imported from a source checkout that was never installed
    __version__ = "0.0.0+unknown"

__all__ = [
    "__version__",
    "ir",
    "tokenize",
    "render",
    "compile_source",
    "compile_file",
    "CompileResult",
    "IdGenerator",
    "LumenError",
    "ParseError",
    "ConfigError",
]
