import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from treelox.interpreter import Interpreter
from treelox.lox import Lox
from treelox.parser import Parser
from treelox.resolver import Resolver
from treelox.scanner import Scanner


def parse(source):
    parser = Parser(Scanner(source).scan_tokens())
    statements = parser.parse()
    assert not parser.errors, parser.errors
    return statements


def resolve(source, interpreter=None):
    interpreter = interpreter or Interpreter()
    statements = parse(source)
    errors = Resolver(interpreter).resolve(statements)
    return statements, errors, interpreter


def execute(source):
    """Resolves and interprets ``source``; returns the outcome and stdout."""
    statements, errors, interpreter = resolve(source)
    assert not errors, errors
    out = io.StringIO()
    with redirect_stdout(out):
        outcome = interpreter.interpret(statements)
    return outcome, out.getvalue()


class LoxTestCase(unittest.TestCase):
    def run_lox(self, source, lox=None):
        lox = lox or Lox()
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            lox.run(source)
        return out.getvalue(), err.getvalue(), lox

    def assertPrints(self, source, *lines):
        out, err, _ = self.run_lox(source)
        self.assertEqual(err, "")
        self.assertEqual(out.splitlines(), list(lines))

    def assertRuntimeError(self, source, message, kind=None):
        outcome, _ = execute(source)
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.error.message, message)
        if kind is not None:
            self.assertIsInstance(outcome.error, kind)
        return outcome.error
