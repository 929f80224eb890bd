"""
Byte constants and literal tokens shared by the parser and printer.
"""

TERMINATOR = 0

# Only these three bytes count as whitespace; carriage returns do not.
WHITESPACE = frozenset(b" \t\n")

QUOTE = ord('"')
BACKSLASH = ord("\\")
COMMA = ord(",")
COLON = ord(":")
OPEN_BRACKET = ord("[")
CLOSE_BRACKET = ord("]")
OPEN_BRACE = ord("{")
CLOSE_BRACE = ord("}")

NULL_LITERAL = b"null"
TRUE_LITERAL = b"true"
FALSE_LITERAL = b"false"

# Bytes charged against the arena for one array element / object member.
VALUE_SLOT_SIZE = 24
PAIR_SLOT_SIZE = 32
