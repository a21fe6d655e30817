"""
Error kinds raised by the questionnaire model.

Each error also derives from the matching builtin, so callers may catch
either ``InvalidArgumentError`` or plain ``ValueError``, and so on.
"""


class QuestionnaireError(Exception):
    """Base class for all questionnaire errors."""
    pass


class InvalidArgumentError(QuestionnaireError, ValueError):
    """Raised for a bad prompt, identifier, callable or answer."""
    pass


class QuestionNotFoundError(QuestionnaireError, LookupError):
    """Raised when an identifier is not registered in a questionnaire."""
    pass


class QuestionOutOfRangeError(QuestionnaireError, IndexError):
    """Raised when a question number falls outside [1, size]."""
    pass
