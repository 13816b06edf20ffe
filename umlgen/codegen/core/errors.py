"""
Exceptions raised while emitting code from a model.

Every failure that affects a single subtree of the model derives from
GeneratorError so the traversal can record it and move on to siblings.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class DirectoryCreateError(GeneratorError):
    """Raised when a package directory cannot be created."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Cannot create directory {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FileWriteError(GeneratorError):
    """Raised when the output sink refuses to write a file."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Cannot write file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnresolvedRelationshipError(GeneratorError):
    """Raised when a relationship points at an element missing from the model."""

    def __init__(self, source_name: str, target_id: str):
        self.source_name = source_name
        self.target_id = target_id
        super().__init__(
            f"Relationship from '{source_name}' references unknown element '{target_id}'"
        )
