# lexmorph/core/domain/exceptions.py
from typing import Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Input Errors ---

class InvalidFormError(DomainError):
    """Raised when a form is empty (or only whitespace) and cannot be classified."""
    def __init__(self, form: str = ""):
        self.form = form
        super().__init__("The form is empty.")


class UnresolvableMarkingError(DomainError):
    """
    Raised when the markers found on a form match no morph type in the table.

    The message distinguishes an unmarked form, a form with only a trailing
    marker, only a leading marker, or both.
    """
    def __init__(self, form: str, prefix: Optional[str] = None, postfix: Optional[str] = None):
        self.form = form
        self.prefix = prefix
        self.postfix = postfix
        if prefix is None and postfix is None:
            message = (
                f"The form '{form}' has no markers, but no morph type is "
                f"configured for unmarked forms."
            )
        elif prefix is None:
            message = (
                f"The form '{form}' has the trailing marker '{postfix}', but no "
                f"morph type is configured with that trailing marker alone."
            )
        elif postfix is None:
            message = (
                f"The form '{form}' has the leading marker '{prefix}', but no "
                f"morph type is configured with that leading marker alone."
            )
        else:
            message = (
                f"The form '{form}' has the leading marker '{prefix}' and the "
                f"trailing marker '{postfix}', but no morph type is configured "
                f"with that combination."
            )
        super().__init__(message)

# --- Configuration Errors ---

class MorphTypeNotFoundError(DomainError):
    """Raised when a morph type id is not present in the active table."""
    def __init__(self, type_id: str):
        self.type_id = type_id
        super().__init__(f"Morph type '{type_id}' is not defined in the morph-type table.")


class MorphTypeTableError(DomainError):
    """Raised when a morph-type table cannot be loaded or is inconsistent."""
    def __init__(self, path: str, detail: Optional[str] = None):
        self.path = path
        self.detail = detail
        message = f"Invalid morph-type table '{path}'."
        if detail:
            message += f" Detail: {detail}"
        super().__init__(message)
