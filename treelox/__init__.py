from .environment import Environment
from .errors import LoxRuntimeError, StackOverflow, StaticError
from .interpreter import Interpreter, RunOutcome
from .lox import Lox
from .parser import Parser
from .resolver import Resolver
from .scanner import Scanner

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "Interpreter",
    "Lox",
    "LoxRuntimeError",
    "Parser",
    "Resolver",
    "RunOutcome",
    "Scanner",
    "StackOverflow",
    "StaticError",
]
