from .errors import StaticError
from .syntax import INITIALIZER, Expr, Stmt, method_scopes


class Resolver(Expr.Visitor, Stmt.Visitor):
    """Static pass computing lexical distances and rejecting invalid programs.

    The bottom of ``scopes`` is the global scope. It takes part in the
    declared-but-not-ready check, but names found there are left out of the
    interpreter's side table so they are looked up dynamically in the globals.
    """

    def __init__(self, interpreter):
        self.interpreter = interpreter
        self.scopes = [{}]
        self.errors = []
        self.current_function = "NONE"
        self.current_class = "NONE"
        self.in_static_method = False
        self.loop_depth = 0

    def resolve(self, statements):
        for statement in statements:
            self.resolve_node(statement)
        return self.errors

    def resolve_node(self, expr_or_stmt):
        expr_or_stmt.accept(self)

    def error(self, token, message):
        self.errors.append(StaticError.at(token, message))

    def visit_block_stmt(self, stmt):
        self.begin_scope()
        for statement in stmt.statements:
            self.resolve_node(statement)
        self.end_scope()

    def visit_class_stmt(self, stmt):
        enclosing_class = self.current_class
        enclosing_static = self.in_static_method
        self.current_class = "CLASS"
        self.in_static_method = False

        self.declare(stmt.name)
        self.define(stmt.name)

        if stmt.superclass:
            self.current_class = "SUBCLASS"
            if stmt.name.lexeme == stmt.superclass.name.lexeme:
                self.error(stmt.superclass.name,
                           "A class can't inherit from itself.")
            self.resolve_node(stmt.superclass)

        for method in stmt.methods:
            names = method_scopes(stmt, method)
            for name in names:
                self.begin_scope()
                self.scopes[-1][name] = True

            kind = "METHOD"
            if method.kind == "static":
                self.in_static_method = True
            elif method.name.lexeme == INITIALIZER:
                kind = "INITIALIZER"
            self.resolve_function(method, kind)
            self.in_static_method = False

            for _ in names:
                self.end_scope()

        self.current_class = enclosing_class
        self.in_static_method = enclosing_static

    def visit_expression_stmt(self, stmt):
        if isinstance(stmt.expression, Expr.Keyword):
            keyword = stmt.expression.keyword
            if self.loop_depth == 0:
                self.error(keyword,
                           f"Can't use '{keyword.lexeme}' outside of a loop.")
            return
        self.resolve_node(stmt.expression)

    def visit_function_stmt(self, stmt):
        self.declare(stmt.name)
        self.define(stmt.name)
        self.resolve_function(stmt, "FUNCTION")

    def visit_if_stmt(self, stmt):
        self.resolve_node(stmt.condition)
        self.resolve_node(stmt.then_branch)
        if stmt.else_branch:
            self.resolve_node(stmt.else_branch)

    def visit_print_stmt(self, stmt):
        self.resolve_node(stmt.expression)

    def visit_return_stmt(self, stmt):
        if self.current_function == "NONE":
            self.error(stmt.keyword, "Can't return from top-level code.")
        if stmt.value:
            self.resolve_node(stmt.value)

    def visit_var_stmt(self, stmt):
        self.declare(stmt.name)
        if stmt.initializer:
            self.resolve_node(stmt.initializer)
        self.define(stmt.name)

    def visit_while_stmt(self, stmt):
        self.resolve_node(stmt.condition)
        self.loop_depth += 1
        self.resolve_node(stmt.body)
        self.loop_depth -= 1
        if stmt.increment:
            self.resolve_node(stmt.increment)

    def visit_assign_expr(self, expr):
        self.resolve_node(expr.value)
        self.resolve_local(expr, expr.name)

    def visit_binary_expr(self, expr):
        self.resolve_node(expr.left)
        self.resolve_node(expr.right)

    def visit_call_expr(self, expr):
        self.resolve_node(expr.callee)
        for argument in expr.arguments:
            self.resolve_node(argument)

    def visit_get_expr(self, expr):
        self.resolve_node(expr.object)

    def visit_grouping_expr(self, expr):
        self.resolve_node(expr.expression)

    def visit_keyword_expr(self, expr):
        self.error(expr.keyword,
                   f"Can't use '{expr.keyword.lexeme}' as a value.")

    def visit_literal_expr(self, expr):
        pass

    def visit_logical_expr(self, expr):
        self.resolve_node(expr.left)
        self.resolve_node(expr.right)

    def visit_set_expr(self, expr):
        self.resolve_node(expr.object)
        self.resolve_node(expr.value)

    def visit_super_expr(self, expr):
        if self.current_class == "NONE":
            self.error(expr.keyword, "Can't use 'super' outside of a class.")
        elif self.current_class != "SUBCLASS":
            self.error(expr.keyword,
                       "Can't use 'super' in a class with no superclass.")
        elif self.in_static_method:
            self.error(expr.keyword, "Can't use 'super' in a static method.")
        self.resolve_local(expr, expr.keyword)

    def visit_this_expr(self, expr):
        if self.current_class == "NONE":
            self.error(expr.keyword, "Can't use 'this' outside of a class.")
            return
        if self.in_static_method:
            self.error(expr.keyword, "Can't use 'this' in a static method.")
            return
        self.resolve_local(expr, expr.keyword)

    def visit_unary_expr(self, expr):
        self.resolve_node(expr.right)

    def visit_variable_expr(self, expr):
        if self.scopes[-1].get(expr.name.lexeme, None) is False:
            where = "local variable" if len(self.scopes) > 1 else "variable"
            self.error(expr.name,
                       f"Can't read {where} in its own initializer.")
        self.resolve_local(expr, expr.name)

    def begin_scope(self):
        self.scopes.append({})

    def end_scope(self):
        self.scopes.pop()

    def declare(self, name):
        self.scopes[-1][name.lexeme] = False

    def define(self, name):
        self.scopes[-1][name.lexeme] = True

    def resolve_function(self, function, kind):
        enclosing_function = self.current_function
        enclosing_loop_depth = self.loop_depth
        self.current_function = kind
        self.loop_depth = 0
        self.begin_scope()
        for param in function.params:
            self.declare(param)
            self.define(param)
        for stmt in function.body:
            self.resolve_node(stmt)
        self.end_scope()
        self.current_function = enclosing_function
        self.loop_depth = enclosing_loop_depth

    def resolve_local(self, expr, name):
        # The global scope at index 0 is never recorded.
        for distance, scope in enumerate(reversed(self.scopes[1:])):
            if name.lexeme in scope:
                self.interpreter.resolve(expr, distance)
                return
