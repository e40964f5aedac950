"""Abrupt completion of a statement.

``Interpreter.execute`` returns ``None`` when a statement completes normally
and a ``Completion`` when it breaks, continues or returns. Enclosing blocks pass
the completion outward; loops consume ``BREAK`` and ``CONTINUE``; function
calls consume ``RETURN``.
"""

BREAK = "BREAK"
CONTINUE = "CONTINUE"
RETURN = "RETURN"

LOOP_CONTROL = (BREAK, CONTINUE)


class Completion:
    def __init__(self, kind, token, value=None):
        self.kind = kind
        self.token = token
        self.value = value

    @classmethod
    def returned(cls, keyword, value):
        return cls(RETURN, keyword, value)

    @classmethod
    def loop_control(cls, keyword):
        return cls(keyword.type, keyword)

    def is_loop_control(self):
        return self.kind in LOOP_CONTROL

    def __repr__(self):
        return f"Completion({self.kind}, {self.value!r})"
