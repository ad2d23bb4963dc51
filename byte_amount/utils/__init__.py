from .console import cnsl, highlighter, set_logger

__all__ = ['cnsl', 'highlighter', 'set_logger']
