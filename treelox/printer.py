from .syntax import Expr, Stmt


class AstPrinter(Expr.Visitor, Stmt.Visitor):
    """Renders syntax trees in a parenthesized prefix form for debugging."""

    def print(self, node):
        if node is None:
            return "(error)"
        return node.accept(self)

    def parenthesize(self, name, *parts):
        rendered = [name]
        for part in parts:
            if isinstance(part, (Expr, Stmt)) or part is None:
                rendered.append(self.print(part))
            else:
                rendered.append(str(part))
        return f"({' '.join(rendered)})"

    def visit_block_stmt(self, stmt):
        return self.parenthesize("block", *stmt.statements)

    def visit_class_stmt(self, stmt):
        name = stmt.name.lexeme
        if stmt.superclass:
            name = f"{name} < {stmt.superclass.name.lexeme}"
        return self.parenthesize(f"class {name}", *stmt.methods)

    def visit_expression_stmt(self, stmt):
        return self.parenthesize(";", stmt.expression)

    def visit_function_stmt(self, stmt):
        params = " ".join(param.lexeme for param in stmt.params)
        head = "fun" if stmt.kind == "function" else stmt.kind
        return self.parenthesize(
            f"{head} {stmt.name.lexeme} ({params})", *stmt.body)

    def visit_if_stmt(self, stmt):
        if stmt.else_branch is None:
            return self.parenthesize("if", stmt.condition, stmt.then_branch)
        return self.parenthesize(
            "if-else", stmt.condition, stmt.then_branch, stmt.else_branch)

    def visit_print_stmt(self, stmt):
        return self.parenthesize("print", stmt.expression)

    def visit_return_stmt(self, stmt):
        if stmt.value is None:
            return "(return)"
        return self.parenthesize("return", stmt.value)

    def visit_var_stmt(self, stmt):
        if stmt.initializer is None:
            return f"(var {stmt.name.lexeme})"
        return self.parenthesize(f"var {stmt.name.lexeme} =", stmt.initializer)

    def visit_while_stmt(self, stmt):
        if stmt.increment is None:
            return self.parenthesize("while", stmt.condition, stmt.body)
        return self.parenthesize(
            "for", stmt.condition, stmt.increment, stmt.body)

    def visit_assign_expr(self, expr):
        return self.parenthesize(f"= {expr.name.lexeme}", expr.value)

    def visit_binary_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_call_expr(self, expr):
        return self.parenthesize("call", expr.callee, *expr.arguments)

    def visit_get_expr(self, expr):
        return self.parenthesize(f". {expr.name.lexeme}", expr.object)

    def visit_grouping_expr(self, expr):
        return self.parenthesize("group", expr.expression)

    def visit_keyword_expr(self, expr):
        return expr.keyword.lexeme

    def visit_literal_expr(self, expr):
        if expr.value is None:
            return "nil"
        if isinstance(expr.value, str):
            return f'"{expr.value}"'
        if isinstance(expr.value, bool):
            return "true" if expr.value else "false"
        return str(expr.value)

    def visit_logical_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_set_expr(self, expr):
        return self.parenthesize(
            f"= . {expr.name.lexeme}", expr.object, expr.value)

    def visit_super_expr(self, expr):
        return f"(super {expr.method.lexeme})"

    def visit_this_expr(self, expr):
        return "this"

    def visit_unary_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_variable_expr(self, expr):
        return expr.name.lexeme
