"""Exceptions raised by the cycle core."""


class CycleError(Exception):
    """Base class for cycle core errors."""


class SharedStoreUnavailableError(CycleError):
    """The shared app group storage could not be written."""

    def __init__(self, app_group_id: str, key: str):
        self.app_group_id = app_group_id
        self.key = key
        super().__init__(f"Shared store '{app_group_id}' unavailable while writing '{key}'")
