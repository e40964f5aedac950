import time

from .control import BREAK, RETURN, Completion
from .environment import Environment
from .errors import (
    ArityMismatch,
    DivisionByZero,
    InvalidReceiver,
    InvalidSuperclass,
    LoopControlError,
    LoxRuntimeError,
    NotCallable,
    OperandError,
    StackOverflow,
    UndefinedProperty,
)
from .runtime import (
    LoxCallable,
    LoxClass,
    LoxFunction,
    LoxInstance,
    make_native_function,
)
from .syntax import INITIALIZER, SUPER, THIS, Expr, Stmt


class RunOutcome:
    """Result of ``Interpreter.interpret``: success, or the runtime error that stopped it."""

    def __init__(self, error=None):
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return "RunOutcome(ok)"
        return f"RunOutcome({self.error!r})"


class Interpreter(Expr.Visitor, Stmt.Visitor):
    def __init__(self):
        self.globals = Environment()
        self.environment = self.globals
        self.locals = {}

        self.globals.define("clock", make_native_function(
            "Clock", 0, time.time))

    def interpret(self, stmts):
        try:
            for stmt in stmts:
                completion = self.execute(stmt)
                if completion is not None and completion.is_loop_control():
                    raise LoopControlError(
                        completion.token,
                        f"Can't use '{completion.token.lexeme}' outside of a loop.")
        except LoxRuntimeError as error:
            return RunOutcome(error)
        except RecursionError:
            raise StackOverflow() from None
        return RunOutcome()

    def stringify(self, object):
        if object is None:
            return "nil"
        if isinstance(object, bool):
            return "true" if object else "false"
        if isinstance(object, float) and object.is_integer() and abs(object) < 1e21:
            # Integral values print without a fraction or exponent.
            return str(int(object))
        return str(object)

    def evaluate(self, expr):
        return expr.accept(self)

    def execute(self, stmt):
        return stmt.accept(self)

    def resolve(self, expr, depth):
        self.locals[expr] = depth

    def execute_block(self, statements, environment):
        previous = self.environment
        try:
            self.environment = environment
            for statement in statements:
                completion = self.execute(statement)
                if completion is not None:
                    return completion
            return None
        finally:
            self.environment = previous

    def visit_block_stmt(self, stmt):
        return self.execute_block(stmt.statements, Environment(self.environment))

    def visit_class_stmt(self, stmt):
        superclass = None
        if stmt.superclass:
            superclass = self.evaluate(stmt.superclass)
            if not isinstance(superclass, LoxClass):
                raise InvalidSuperclass(
                    stmt.superclass.name, "Superclass must be a class.")

        self.environment.define(stmt.name.lexeme, None)

        if superclass:
            self.environment = Environment(self.environment)
            self.environment.define(SUPER, superclass)

        methods = {}
        static_methods = {}
        for method in stmt.methods:
            if method.kind == "static":
                static_methods[method.name.lexeme] = LoxFunction(
                    method, self.environment, False)
            else:
                methods[method.name.lexeme] = LoxFunction(
                    method, self.environment,
                    method.name.lexeme == INITIALIZER)

        klass = LoxClass(stmt.name.lexeme, superclass, methods, static_methods)

        if superclass:
            self.environment = self.environment.enclosing

        self.environment.assign(stmt.name, klass)

    def visit_expression_stmt(self, stmt):
        if isinstance(stmt.expression, Expr.Keyword):
            return Completion.loop_control(stmt.expression.keyword)
        self.evaluate(stmt.expression)

    def visit_function_stmt(self, stmt):
        func = LoxFunction(stmt, self.environment, False)
        self.environment.define(stmt.name.lexeme, func)

    def visit_if_stmt(self, stmt):
        if self.is_truthy(self.evaluate(stmt.condition)):
            return self.execute(stmt.then_branch)
        elif stmt.else_branch:
            return self.execute(stmt.else_branch)

    def visit_print_stmt(self, stmt):
        value = self.evaluate(stmt.expression)
        print(self.stringify(value))

    def visit_return_stmt(self, stmt):
        value = None
        if stmt.value:
            value = self.evaluate(stmt.value)
        return Completion.returned(stmt.keyword, value)

    def visit_var_stmt(self, stmt):
        value = None
        if stmt.initializer:
            value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value)

    def visit_while_stmt(self, stmt):
        while self.is_truthy(self.evaluate(stmt.condition)):
            completion = self.execute(stmt.body)
            if completion is not None:
                if completion.kind == BREAK:
                    break
                if completion.kind == RETURN:
                    return completion
            if stmt.increment:
                self.evaluate(stmt.increment)

    def visit_assign_expr(self, expr):
        value = self.evaluate(expr.value)
        self.assign_variable(expr.name, expr, value)
        return value

    def visit_binary_expr(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        operator = expr.operator
        match operator.type:
            case "BANG_EQUAL": return not self.is_equal(left, right)
            case "EQUAL_EQUAL": return self.is_equal(left, right)
            case "GREATER":
                self.check_operands(operator, left, right)
                return left > right
            case "GREATER_EQUAL":
                self.check_operands(operator, left, right)
                return left >= right
            case "LESS":
                self.check_operands(operator, left, right)
                return left < right
            case "LESS_EQUAL":
                self.check_operands(operator, left, right)
                return left <= right
            case "MINUS":
                self.check_operands(operator, left, right)
                return left - right
            case "PLUS":
                if self.is_number(left) and self.is_number(right):
                    return left + right
                if any(self.is_number(operand) or isinstance(operand, str)
                       for operand in (left, right)):
                    return self.stringify(left) + self.stringify(right)
                raise OperandError(
                    operator, "Operands must be two numbers or two strings.")
            case "SLASH":
                self.check_operands(operator, left, right)
                if right == 0.0:
                    raise DivisionByZero(operator, "Division by zero.")
                return left / right
            case "STAR":
                self.check_operands(operator, left, right)
                return left * right
            case _:
                return None

    def visit_call_expr(self, expr):
        callee = self.evaluate(expr.callee)
        arguments = list(map(self.evaluate, expr.arguments))
        if not isinstance(callee, LoxCallable):
            raise NotCallable(
                expr.paren, "Can only call functions and classes.")
        if len(arguments) != callee.arity():
            raise ArityMismatch(expr.paren, callee.arity(), len(arguments))
        return callee.call(self, arguments)

    def visit_get_expr(self, expr):
        obj = self.evaluate(expr.object)
        if isinstance(obj, (LoxInstance, LoxClass)):
            return obj.get(expr.name)
        raise InvalidReceiver(
            expr.name, "Only instances have properties.")

    def visit_grouping_expr(self, expr):
        return self.evaluate(expr.expression)

    def visit_keyword_expr(self, expr):
        raise LoopControlError(
            expr.keyword, f"Can't use '{expr.keyword.lexeme}' as a value.")

    def visit_literal_expr(self, expr):
        return expr.value

    def visit_logical_expr(self, expr):
        left = self.evaluate(expr.left)
        if expr.operator.type == "OR":
            if self.is_truthy(left):
                return left
        else:
            if not self.is_truthy(left):
                return left
        return self.evaluate(expr.right)

    def visit_set_expr(self, expr):
        obj = self.evaluate(expr.object)
        if not isinstance(obj, LoxInstance):
            raise InvalidReceiver(
                expr.name, "Only instances have fields.")
        value = self.evaluate(expr.value)
        obj.set(expr.name, value)
        return value

    def visit_super_expr(self, expr):
        distance = self.locals[expr]
        superclass = self.environment.get_at(distance, SUPER)
        # 'this' is bound in the scope just inside the one holding 'super'.
        instance = self.environment.get_at(distance - 1, THIS)

        method = superclass.find_method(expr.method.lexeme)

        if not method:
            raise UndefinedProperty(
                expr.method, f"Undefined property '{expr.method.lexeme}'.")

        return method.bind(instance)

    def visit_this_expr(self, expr):
        return self.lookup_variable(expr.keyword, expr)

    def visit_unary_expr(self, expr):
        right = self.evaluate(expr.right)
        match expr.operator.type:
            case "BANG": return not self.is_truthy(right)
            case "MINUS":
                self.check_operand(expr.operator, right)
                return -right
            case "PLUS_PLUS" | "MINUS_MINUS":
                self.check_operand(expr.operator, right)
                step = 1.0 if expr.operator.type == "PLUS_PLUS" else -1.0
                value = right + step
                self.assign_variable(expr.right.name, expr.right, value)
                return value
            case _: return None

    def visit_variable_expr(self, expr):
        return self.lookup_variable(expr.name, expr)

    def lookup_variable(self, name, expr):
        if expr in self.locals:
            return self.environment.get_at(self.locals[expr], name.lexeme)
        return self.globals.get(name)

    def assign_variable(self, name, expr, value):
        if expr in self.locals:
            self.environment.assign_at(self.locals[expr], name.lexeme, value)
        else:
            self.globals.assign(name, value)

    def is_truthy(self, object):
        if object is None:
            return False
        if isinstance(object, bool):
            return object
        return True

    def is_number(self, object):
        return isinstance(object, float)

    def is_equal(self, left, right):
        if left is None:
            return right is None
        # bool is an int subclass, so True == 1.0 unless kinds are compared first.
        if type(left) is not type(right):
            return False
        return left == right

    def check_operand(self, operator, operand):
        if not self.is_number(operand):
            raise OperandError(operator, "Operand must be a number.")

    def check_operands(self, operator, left, right):
        if not (self.is_number(left) and self.is_number(right)):
            raise OperandError(operator, "Operands must be numbers.")
