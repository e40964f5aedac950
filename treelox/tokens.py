KEYWORDS = {
    "and",
    "break",
    "class",
    "continue",
    "else",
    "false",
    "for",
    "fun",
    "if",
    "nil",
    "or",
    "print",
    "return",
    "static",
    "super",
    "this",
    "true",
    "var",
    "while",
}


class Token:
    def __init__(self, type, lexeme, literal, line):
        self.type = type
        self.lexeme = lexeme
        self.literal = literal
        self.line = line

    def __str__(self):
        return f"{self.type} {self.lexeme} {self.literal}"

    def __repr__(self):
        return f"Token({self.type!r}, {self.lexeme!r}, {self.literal!r}, {self.line})"
