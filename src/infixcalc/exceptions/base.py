from __future__ import annotations


class InfixCalcError(Exception):
    """Base exception class for all infixcalc-specific errors.

    This is the root of the infixcalc exception hierarchy. Every custom
    exception in the package inherits from this class, which allows catching
    all calculator errors at the CLI boundary while letting system exceptions
    propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            value = calculate_expression(line)
        except InfixCalcError as e:
            # Catch all infixcalc errors at the CLI boundary
            err_console.print(f"Error: {e.message}")
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the InfixCalcError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
