"""Validator configuration.

ValidatorConfig is a frozen dataclass, immutable after creation and safe
to share between threads and validator instances.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Messages and diagnostics for a ``Validator``. Immutable after creation.

    Override what you need::

        config = ValidatorConfig(error_format="{message}", debug=True)

    ``error_format`` receives ``field`` and ``message``; ``size_message``
    receives ``sizes`` (the allowed array sizes, e.g. ``{1, 2}`` or ``1..3``).
    """

    # Error text
    error_format: str = "{field}: {message}"
    empty_message: str = "not allowed for empty"
    size_message: str = "doesn't have values specified: {sizes}"

    # Log every rule outcome at DEBUG, not only failures
    debug: bool = False
