class PersonInfoError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateSubjectError(PersonInfoError):
    """A person with the same name, surname and patronymic is already stored."""


class InvalidSubjectError(PersonInfoError):
    """A prediction provider had no answer for the given name."""


class ProviderError(PersonInfoError):
    """Transport-level failure talking to a prediction provider."""


class ProviderTimeoutError(ProviderError):
    pass


class ProviderUnavailableError(ProviderError):
    pass


class PersonNotFoundError(PersonInfoError):
    """Update or delete addressed an id that does not exist."""


class NoUpdatedFieldsError(PersonInfoError):
    """A patch carried no changes."""


class PersistenceError(PersonInfoError):
    """Opaque storage failure: connectivity, constraint or serialization."""


class ShutdownTimeoutError(PersonInfoError):
    """A bounded shutdown step did not finish within its grace period."""
