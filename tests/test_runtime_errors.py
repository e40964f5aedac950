import unittest

from treelox.errors import (
    ArityMismatch,
    DivisionByZero,
    InvalidReceiver,
    InvalidSuperclass,
    LoxRuntimeError,
    NotCallable,
    OperandError,
    StackOverflow,
    UndefinedProperty,
    UndefinedVariable,
)
from treelox.lox import Lox

from tests.support import LoxTestCase, execute


class RuntimeErrorKindTests(LoxTestCase):
    def test_operand_errors(self):
        self.assertRuntimeError('print -"a";', "Operand must be a number.",
                                OperandError)
        self.assertRuntimeError('print 1 < "a";', "Operands must be numbers.",
                                OperandError)
        self.assertRuntimeError(
            "print nil + nil;",
            "Operands must be two numbers or two strings.", OperandError)
        self.assertRuntimeError('var s = "a"; ++s;',
                                "Operand must be a number.", OperandError)

    def test_division_by_zero(self):
        error = self.assertRuntimeError("print 1 / 0.0;", "Division by zero.",
                                        DivisionByZero)
        self.assertEqual(error.token.lexeme, "/")
        self.assertRuntimeError("print 0 / 0;", "Division by zero.")

    def test_arity_mismatch_reports_both_counts(self):
        error = self.assertRuntimeError(
            "fun f(a, b) {} f(1);", "Expected 2 arguments but got 1.",
            ArityMismatch)
        self.assertEqual((error.expected, error.actual), (2, 1))
        self.assertRuntimeError("class A {} A(1);",
                                "Expected 0 arguments but got 1.")
        self.assertRuntimeError("clock(1);", "Expected 0 arguments but got 1.")

    def test_calling_non_callable_is_distinct(self):
        error = self.assertRuntimeError('"abc"();',
                                        "Can only call functions and classes.",
                                        NotCallable)
        self.assertNotIsInstance(error, ArityMismatch)

    def test_undefined_variable(self):
        self.assertRuntimeError("print y;", "Undefined variable 'y'.",
                                UndefinedVariable)
        self.assertRuntimeError("y = 1;", "Undefined variable 'y'.",
                                UndefinedVariable)

    def test_receivers(self):
        self.assertRuntimeError("var x = 1; print x.y;",
                                "Only instances have properties.",
                                InvalidReceiver)
        self.assertRuntimeError("var x = 1; x.y = 2;",
                                "Only instances have fields.", InvalidReceiver)
        self.assertRuntimeError("class A {} A.y = 2;",
                                "Only instances have fields.", InvalidReceiver)

    def test_undefined_properties(self):
        self.assertRuntimeError("class Foo {} print Foo().bar;",
                                "Undefined property 'bar'.", UndefinedProperty)
        self.assertRuntimeError("class Foo {} print Foo.bar;",
                                "Undefined static method 'bar'.",
                                UndefinedProperty)
        self.assertRuntimeError(
            "class A {} class B < A { m() { return super.missing; } } B().m();",
            "Undefined property 'missing'.", UndefinedProperty)

    def test_invalid_superclass(self):
        self.assertRuntimeError('var NotClass = "x"; class B < NotClass {}',
                                "Superclass must be a class.",
                                InvalidSuperclass)

    def test_all_kinds_share_a_base(self):
        for kind in (ArityMismatch, DivisionByZero, InvalidReceiver,
                     InvalidSuperclass, NotCallable, OperandError,
                     UndefinedProperty, UndefinedVariable):
            self.assertTrue(issubclass(kind, LoxRuntimeError))
        self.assertFalse(issubclass(StackOverflow, LoxRuntimeError))


class RuntimeErrorReportingTests(LoxTestCase):
    def test_halts_at_first_error_without_rollback(self):
        out, err, lox = self.run_lox("print 1;\nprint nil + nil;\nprint 2;")
        self.assertEqual(out, "1\n")
        self.assertEqual(
            err, "Operands must be two numbers or two strings. [line 2]\n")
        self.assertTrue(lox.had_runtime_error)

    def test_error_inside_call_restores_global_scope(self):
        lox = Lox()
        self.run_lox("fun f() { var local = 1; return nil + nil; } f();", lox)
        out, err, _ = self.run_lox("var after = 2; print after;", lox)
        self.assertEqual((out, err), ("2\n", ""))
        self.assertIs(lox.interpreter.environment, lox.interpreter.globals)

    def test_outcome_success(self):
        outcome, out = execute("print 1;")
        self.assertTrue(outcome.ok)
        self.assertIsNone(outcome.error)
        self.assertEqual(out, "1\n")


class StackOverflowTests(unittest.TestCase):
    def test_unbounded_recursion_is_fatal(self):
        with self.assertRaises(StackOverflow):
            Lox().run("fun f() { f(); } f();")


if __name__ == "__main__":
    unittest.main()
