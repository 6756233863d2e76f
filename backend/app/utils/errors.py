"""Error taxonomy shared by the action handlers and the HTTP layer."""


class ActionError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ActionError):
    status_code = 401
    default_message = "You are not authorised to perform this action."


class ValidationFailed(ActionError):
    status_code = 400
    default_message = "Invalid data"


class NotFound(ActionError):
    status_code = 404
    default_message = "Not found"


class PersistenceFailed(ActionError):
    status_code = 500
    default_message = "Database operation failed"


class DatastoreNotConfigured(ActionError):
    status_code = 503
    default_message = "Database is not configured."
