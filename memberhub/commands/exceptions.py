class BaseException(Exception):
    message = "Something went wrong"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(BaseException):
    message = "Invalid input"


class NotFound(BaseException):
    message = "Cant find the requested resource"


class Conflict(BaseException):
    message = "The operation conflicts with existing data"
