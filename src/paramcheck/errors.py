"""Paramcheck exception hierarchy.

Only programmer errors are raised. Bad input data never raises; it is
recorded on the ``Result`` instead.
"""


class ParamcheckError(Exception):
    """Base for all paramcheck-specific errors."""


class ConfigurationError(ParamcheckError, ValueError):
    """Raised when a rule or validation spec is malformed.

    Typically raised while building rules with ``make_rule()`` or while
    compiling a ``Spec``, before any input is looked at.
    """
