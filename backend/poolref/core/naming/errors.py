"""
Naming errors.

Every failure raised by naming contexts and object factories is a NamingError.
"""


class NamingError(Exception):
    """Base class for naming and reference-resolution failures."""

    pass


class NameNotFoundError(NamingError):
    """No binding exists for the name."""

    def __init__(self, name: str) -> None:
        super().__init__(f'The name "{name}" is not bound.')
        self.name = name


class NameAlreadyBoundError(NamingError):
    def __init__(self, name: str) -> None:
        super().__init__(f'The name "{name}" is already bound.')
        self.name = name


class UnsupportedTargetTypeError(NamingError):
    """The reference declares a target type this factory cannot build."""

    def __init__(self, class_name: str) -> None:
        super().__init__(
            f"{class_name} is not a valid class name/type for this object factory."
        )
        self.class_name = class_name


class DelegateLookupError(NamingError):
    """
    Looking up the delegate data source failed.

    phase is "local" (the context supplied with the lookup) or "default"
    (the process default context).
    """

    def __init__(self, phase: str, name: str, reason: str | None = None) -> None:
        where = "the local context" if phase == "local" else "the default context"
        msg = reason or f'The name "{name}" can not be found in {where}.'
        super().__init__(msg)
        self.phase = phase
        self.name = name


class MisconfiguredDelegationError(NamingError):
    """dataSourceJNDI is set but there is no context to look it up in."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f'dataSourceJNDI is configured as "{name}", but no naming context is available.'
        )
        self.name = name
