"""
LUMEN core: lexer, parser, style resolution and tree compiler.
"""
