from .control import RETURN
from .environment import Environment
from .errors import LoopControlError, UndefinedProperty
from .syntax import INITIALIZER, THIS


class LoxCallable:
    def arity(self):
        raise NotImplementedError()

    def call(self, interpreter, arguments):
        raise NotImplementedError()


def make_native_function(name, arity, call):
    return type(name, (LoxCallable,), {
        "arity": lambda self: arity,
        "call": lambda self, interpreter, arguments: call(*arguments),
        "__str__": lambda self: "<native fn>",
    })()


class LoxFunction(LoxCallable):
    def __init__(self, declaration, closure, is_initializer):
        self.declaration = declaration
        self.closure = closure
        self.is_initializer = is_initializer

    def arity(self):
        return len(self.declaration.params)

    def bind(self, instance):
        environment = Environment(self.closure)
        environment.define(THIS, instance)
        return LoxFunction(self.declaration, environment, self.is_initializer)

    def call(self, interpreter, arguments):
        environment = Environment(self.closure)
        for param, argument in zip(self.declaration.params, arguments):
            environment.define(param.lexeme, argument)

        completion = interpreter.execute_block(
            self.declaration.body, environment)

        if completion is not None and completion.is_loop_control():
            raise LoopControlError(
                completion.token,
                f"Can't use '{completion.token.lexeme}' outside of a loop.")
        if self.is_initializer:
            return self.closure.get_at(0, THIS)
        if completion is not None and completion.kind == RETURN:
            return completion.value
        return None

    def __str__(self):
        return f"<fn {self.declaration.name.lexeme}>"


class LoxClass(LoxCallable):
    def __init__(self, name, superclass, methods, static_methods):
        self.name = name
        self.superclass = superclass
        self.methods = methods
        self.static_methods = static_methods

    def arity(self):
        if initializer := self.find_method(INITIALIZER):
            return initializer.arity()
        return 0

    def call(self, interpreter, arguments):
        instance = LoxInstance(self)
        if initializer := self.find_method(INITIALIZER):
            initializer.bind(instance).call(interpreter, arguments)
        return instance

    def find_method(self, name):
        if method := self.methods.get(name, None):
            return method
        if self.superclass:
            return self.superclass.find_method(name)
        return None

    def find_static_method(self, name):
        if method := self.static_methods.get(name, None):
            return method
        if self.superclass:
            return self.superclass.find_static_method(name)
        return None

    def get(self, name):
        if method := self.find_static_method(name.lexeme):
            return method
        raise UndefinedProperty(
            name, f"Undefined static method '{name.lexeme}'.")

    def __str__(self):
        return self.name


class LoxInstance:
    def __init__(self, klass):
        self.klass = klass
        self.fields = {}

    def get(self, name):
        if name.lexeme in self.fields:
            return self.fields[name.lexeme]
        if method := self.klass.find_method(name.lexeme):
            return method.bind(self)
        if self.klass.find_static_method(name.lexeme):
            raise UndefinedProperty(
                name, f"Instance cannot call static method '{name.lexeme}'.")
        raise UndefinedProperty(
            name, f"Undefined property '{name.lexeme}'.")

    def set(self, name, value):
        self.fields[name.lexeme] = value

    def __str__(self):
        return f"{self.klass.name} instance"
