import sys

from .errors import StackOverflow
from .interpreter import Interpreter
from .parser import Parser
from .printer import AstPrinter
from .resolver import Resolver
from .scanner import Scanner

EXIT_STATIC_ERROR = 65
EXIT_RUNTIME_ERROR = 70
EXIT_STACK_OVERFLOW = 71


class Lox:
    """Runs Lox source through the scanner, parser, resolver and interpreter.

    One ``Lox`` keeps one interpreter, so globals defined by earlier calls to
    ``run`` stay visible to later ones, as they do across prompt lines.
    """

    def __init__(self, debug=False):
        self.interpreter = Interpreter()
        self.debug = debug
        self.had_error = False
        self.had_runtime_error = False

    def main(self, filename=None):
        try:
            if filename is not None:
                self.run_file(filename)
            else:
                self.run_prompt()
        except StackOverflow as error:
            print(error, file=sys.stderr)
            return EXIT_STACK_OVERFLOW

        if self.had_error:
            return EXIT_STATIC_ERROR
        if self.had_runtime_error:
            return EXIT_RUNTIME_ERROR
        return 0

    def run_file(self, filename):
        with open(filename, "r", encoding="utf-8") as file:
            self.run(file.read())

    def run_prompt(self):
        while True:
            try:
                line = input("> ")
            except EOFError:
                print()
                break
            self.had_error = False
            self.had_runtime_error = False
            self.run(line)

    def run(self, source):
        try:
            statements = self.analyze(source)
        except RecursionError:
            raise StackOverflow() from None
        if statements is None:
            return

        outcome = self.interpreter.interpret(statements)
        if not outcome.ok:
            self.runtime_error(outcome.error)

    def analyze(self, source):
        """Scans, parses and resolves; returns None after reporting static errors."""
        scanner = Scanner(source)
        tokens = scanner.scan_tokens()

        parser = Parser(tokens)
        statements = parser.parse()

        if self.debug:
            for token in tokens:
                print(token, file=sys.stderr)
            printer = AstPrinter()
            for statement in statements:
                print(printer.print(statement), file=sys.stderr)

        self.report(scanner.errors + parser.errors)
        if self.had_error:
            return None

        resolver = Resolver(self.interpreter)
        self.report(resolver.resolve(statements))
        if self.had_error:
            return None
        return statements

    def report(self, errors):
        for error in sorted(errors, key=lambda error: error.line):
            print(error, file=sys.stderr)
            self.had_error = True

    def runtime_error(self, error):
        print(error, file=sys.stderr)
        self.had_runtime_error = True
