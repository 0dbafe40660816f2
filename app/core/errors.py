# app/core/errors.py


class CustomerDirectoryError(Exception):
    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class CustomerValidationError(CustomerDirectoryError):
    status_code = 400
    message = "All fields are required"


class CustomerReferenceError(CustomerDirectoryError):
    status_code = 400
    message = "City or Company does not exist"


class CustomerNotFoundError(CustomerDirectoryError):
    status_code = 404
    message = "Customer not found"
