"""
Parse errors raised while turning robots.txt tokens into an AST.

Every error is a `RobotsSyntaxError`, itself a builtin `SyntaxError`, and carries
the offending token data as attributes so callers can branch on the error class
and its fields rather than on message text.

Classes:
    RobotsSyntaxError: Base class for all parse failures.
    UnexpectedEndOfInput: A token was required but the input ran out.
    UnexpectedTokenError: A token of the wrong kind was found.
    NoRuleProductionError: A rule line was required but the token cannot start one.
"""


class RobotsSyntaxError(SyntaxError):
    """Base class for robots.txt parse errors.

    Attributes:
        found (str | None): Kind of the offending token, or None at end of input.
        position (int | None): Source offset of the offending token, if any.
    """

    def __init__(
        self, message: str, found: str | None = None, position: int | None = None
    ):
        super().__init__(message)
        self.found = found
        self.position = position


class UnexpectedEndOfInput(RobotsSyntaxError):
    """Raised when the parser asks for a token after the last one."""

    def __init__(self) -> None:
        super().__init__("Unexpected EOF")


class UnexpectedTokenError(RobotsSyntaxError):
    """Raised when the current token is not of the expected kind.

    Attributes:
        expected (str | None): The kind the grammar required. None means the
            grammar required the end of input.
    """

    def __init__(self, expected: str | None, found: str, position: int):
        wanted = expected if expected is not None else "end of input"
        super().__init__(
            f"Expected {wanted}, found {found} at pos {position}", found, position
        )
        self.expected = expected


class NoRuleProductionError(RobotsSyntaxError):
    """Raised when a rule line is required but the token cannot begin one."""

    def __init__(self, found: str, position: int):
        super().__init__(
            f"Syntax error: Expected a rule at pos {position}, found {found}",
            found,
            position,
        )


__all__ = [
    "NoRuleProductionError",
    "RobotsSyntaxError",
    "UnexpectedEndOfInput",
    "UnexpectedTokenError",
]
