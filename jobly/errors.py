"""Domain errors raised by the service layer.

Route handlers translate these into HTTP status codes; services never raise
``HTTPException`` themselves.
"""


class JoblyError(RuntimeError):
    pass


class NotFoundError(JoblyError):
    pass


class ConflictError(JoblyError):
    pass


class UnauthorizedError(JoblyError):
    pass


class BadRequestError(JoblyError):
    pass
