import unittest

from tests.support import LoxTestCase


class InstanceTests(LoxTestCase):
    def test_fields_and_methods(self):
        self.assertPrints(
            "class Point {"
            "  init(x, y) { this.x = x; this.y = y; }"
            "  sum() { return this.x + this.y; }"
            "}"
            "var p = Point(1, 2); print p.sum(); p.x = 10; print p.sum();",
            "3", "12")

    def test_fields_shadow_methods(self):
        self.assertPrints(
            'class A { m() { return "method"; } }'
            'var a = A(); a.m = "field"; print a.m;',
            "field")

    def test_bound_method_remembers_instance(self):
        self.assertPrints(
            "class P { init(n) { this.n = n; } get() { return this.n; } }"
            "var m = P(3).get; var q = P(4); q.get2 = m; print q.get2();",
            "3")

    def test_this_inside_nested_function(self):
        self.assertPrints(
            "class Thing {"
            "  getCallback() { fun local() { print this; } return local; }"
            "}"
            "var callback = Thing().getCallback(); callback();",
            "Thing instance")

    def test_methods_can_refer_to_their_class(self):
        self.assertPrints(
            "class Node { make() { return Node(); } } print Node().make();",
            "Node instance")

    def test_set_returns_assigned_value(self):
        self.assertPrints("class A {} var a = A(); print a.x = 5;", "5")


class InitializerTests(LoxTestCase):
    def test_construction_yields_instance_despite_return(self):
        self.assertPrints(
            "class Foo { init() { this.x = 1; return 5; } }"
            "var f = Foo(); print f.x; print f;",
            "1", "Foo instance")

    def test_calling_init_directly_returns_this(self):
        self.assertPrints(
            "class Foo { init() { return; } }"
            "var f = Foo(); print f.init() == f;",
            "true")

    def test_class_arity_follows_initializer(self):
        self.assertPrints(
            "class A { init(x) { this.x = x; } } class B < A {}"
            "print B(7).x;",
            "7")


class InheritanceTests(LoxTestCase):
    def test_inherited_method(self):
        self.assertPrints(
            'class A { hello() { return "hi from A"; } } class B < A {}'
            "print B().hello();",
            "hi from A")

    def test_super_calls_superclass_body_on_current_instance(self):
        self.assertPrints(
            "class A { method() { print \"A method\"; } }"
            "class B < A {"
            "  method() { print \"B method\"; }"
            "  test() { super.method(); }"
            "}"
            "class C < B {}"
            "C().test();",
            "A method")

    def test_super_binds_this(self):
        self.assertPrints(
            "class A { describe() { return \"A:\" + this.name; } }"
            "class B < A {"
            "  init(name) { this.name = name; }"
            "  describe() { return \"B/\" + super.describe(); }"
            "}"
            'print B("bee").describe();',
            "B/A:bee")

    def test_super_initializer(self):
        self.assertPrints(
            "class A { init(x) { this.x = x; } }"
            "class B < A { init(x, y) { super.init(x); this.y = y; } }"
            "var b = B(1, 2); print b.x + b.y;",
            "3")

    def test_override_dispatches_dynamically(self):
        self.assertPrints(
            'class A { name() { return "A"; } greet() { print "I am " + this.name(); } }'
            'class B < A { name() { return "B"; } }'
            "B().greet();",
            "I am B")


class StaticMethodTests(LoxTestCase):
    def test_static_method_on_class(self):
        self.assertPrints(
            "class Math { static square(n) { return n * n; } }"
            "print Math.square(3);",
            "9")

    def test_static_methods_are_inherited(self):
        self.assertPrints(
            "class Math { static square(n) { return n * n; } }"
            "class More < Math {}"
            "print More.square(2);",
            "4")

    def test_static_method_not_available_on_instance(self):
        out, err, lox = self.run_lox(
            "class Math { static square(n) { return n * n; } }\n"
            "Math().square(2);")
        self.assertEqual(out, "")
        self.assertEqual(
            err, "Instance cannot call static method 'square'. [line 2]\n")
        self.assertTrue(lox.had_runtime_error)


if __name__ == "__main__":
    unittest.main()
