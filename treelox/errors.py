"""Errors raised or collected while running a Lox program.

Static errors come from the scanner, parser and resolver. They are collected
rather than raised so one pass can report several of them. Runtime errors
unwind the whole evaluation up to ``Interpreter.interpret``.
"""


class StaticError:
    def __init__(self, line, where, message):
        self.line = line
        self.where = where
        self.message = message

    @classmethod
    def at(cls, token, message):
        if token.type == "EOF":
            return cls(token.line, " at end", message)
        return cls(token.line, f" at '{token.lexeme}'", message)

    def __str__(self):
        return f"[line {self.line}] Error{self.where}: {self.message}"

    def __repr__(self):
        return f"StaticError({self.line}, {self.where!r}, {self.message!r})"


class LoxRuntimeError(RuntimeError):
    def __init__(self, token, message):
        super().__init__(message)
        self.token = token
        self.message = message

    def __str__(self):
        return f"{self.message} [line {self.token.line}]"


class OperandError(LoxRuntimeError):
    pass


class DivisionByZero(LoxRuntimeError):
    pass


class NotCallable(LoxRuntimeError):
    pass


class ArityMismatch(LoxRuntimeError):
    def __init__(self, token, expected, actual):
        super().__init__(
            token, f"Expected {expected} arguments but got {actual}.")
        self.expected = expected
        self.actual = actual


class UndefinedVariable(LoxRuntimeError):
    def __init__(self, token):
        super().__init__(token, f"Undefined variable '{token.lexeme}'.")


class UndefinedProperty(LoxRuntimeError):
    pass


class InvalidReceiver(LoxRuntimeError):
    pass


class InvalidSuperclass(LoxRuntimeError):
    pass


class LoopControlError(LoxRuntimeError):
    pass


class StackOverflow(Exception):
    """The host call stack ran out while evaluating a program.

    Not a ``LoxRuntimeError``: it is never returned as a run outcome and it
    ends the process.
    """

    message = "Stack overflow."

    def __str__(self):
        return self.message
