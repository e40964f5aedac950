import unittest

from tests.support import LoxTestCase


class ClosureTests(LoxTestCase):
    def test_closure_sees_later_writes_to_captured_variable(self):
        self.assertPrints(
            "var f; { var x = 1; fun g() { return x; } f = g; x = 2; } print f();",
            "2")

    def test_each_call_gets_its_own_environment(self):
        self.assertPrints(
            "fun makeCounter() {"
            "  var i = 0;"
            "  fun count() { i = i + 1; return i; }"
            "  return count;"
            "}"
            "var c = makeCounter(); print c(); print c();"
            "var d = makeCounter(); print d();",
            "1", "2", "1")

    def test_closures_sharing_one_environment(self):
        self.assertPrints(
            "var get; var set;"
            "{ var v = 1;"
            "  fun g() { return v; } fun s(n) { v = n; }"
            "  get = g; set = s; }"
            "set(42); print get();",
            "42")

    def test_resolution_is_fixed_at_declaration(self):
        self.assertPrints(
            'var a = "global";'
            '{ fun showA() { print a; } showA(); var a = "block"; showA(); }',
            "global", "global")


class CallTests(LoxTestCase):
    def test_return_value_and_recursion(self):
        self.assertPrints(
            "fun fib(n) { if (n < 2) return n; return fib(n - 1) + fib(n - 2); }"
            "print fib(10);",
            "55")

    def test_missing_return_yields_nil(self):
        self.assertPrints("fun f() {} print f();", "nil")

    def test_arguments_evaluated_left_to_right(self):
        self.assertPrints(
            "fun show(x) { print x; return x; }"
            "fun pair(a, b) { return a + b; }"
            "print pair(show(1), show(2));",
            "1", "2", "3")

    def test_return_unwinds_through_loops_and_blocks(self):
        self.assertPrints(
            "fun find() {"
            "  var i = 0;"
            "  while (true) { { i = i + 1; if (i == 3) return i; } }"
            "}"
            "print find();",
            "3")

    def test_functions_are_first_class(self):
        self.assertPrints(
            "fun twice(f, x) { return f(f(x)); }"
            "fun inc(n) { return n + 1; }"
            "print twice(inc, 5);",
            "7")

    def test_mutual_recursion_between_globals(self):
        self.assertPrints(
            "fun isEven(n) { if (n == 0) return true; return isOdd(n - 1); }"
            "fun isOdd(n) { if (n == 0) return false; return isEven(n - 1); }"
            "print isEven(6); print isOdd(3);",
            "true", "true")


if __name__ == "__main__":
    unittest.main()
