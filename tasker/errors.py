# Every failure a request can hit. The app maps each one to a single
# plain-text response carrying `message` with `status_code`.


class TaskerError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestDecodeError(TaskerError):
    """Body was not a JSON object with string fields."""


class EmptyTaskError(TaskerError):
    def __init__(self, message: str = "Cannot add an empty task."):
        super().__init__(message)


class TaskNotFoundError(TaskerError):
    """Nothing in the collection matched (also used for an empty list)."""


class StoreError(TaskerError):
    """The database call itself failed."""
