class ScopeError(Exception):
    """Base class for errors raised by the scope runtime."""

    pass


class UnbalancedScopeError(ScopeError):
    """Raised when a scope is closed without a matching open.

    This is a programming error in the caller: the traversal that drives
    `ScopeManager.begin` / `ScopeManager.end` is no longer balanced and the
    current render must be aborted.
    """

    pass


class DuplicateAttributeError(ScopeError):
    """Raised when an attribute name is recorded twice on the same element.

    Names are compared case-insensitively, so ``class`` and ``CLASS`` collide.
    """

    def __init__(self, name: str, tag_name: str | None = None):
        self.name = name
        self.tag_name = tag_name
        if tag_name:
            message = f"Attribute '{name}' is already present on <{tag_name}>."
        else:
            message = f"Attribute '{name}' is already present."
        super().__init__(message)
