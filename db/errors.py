"""
db/errors.py
------------
Exceptions raised by the database layer.
"""


class DataAccessError(Exception):
    """
    A statement failed inside the database driver.

    Attributes:
        operation: Label of the operation that failed (e.g. 'add_token').
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        super().__init__(f"Error during {operation}: {cause}")
