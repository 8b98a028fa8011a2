"""
Domain exceptions for bookkeeping services.

Each exception carries the HTTP status it maps to; the API layer
turns them into ``{"message": ...}`` responses.
"""


class BookkeepingError(Exception):
    """Base exception for bookkeeping services."""
    status_code = 400
    default_message = "Invalid request."
    
    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(BookkeepingError):
    """Raised when a referenced record does not exist."""
    status_code = 404
    default_message = "Record not found."
    
    def __init__(self, entity: str = "Record", entity_id=None):
        self.entity = entity
        self.entity_id = entity_id
        if entity_id is None:
            message = f"{entity} not found"
        else:
            message = f"{entity} {entity_id} not found"
        super().__init__(message)


class ProjectNotFoundError(NotFoundError):
    """Raised when a settlement is requested for an unknown project."""
    
    def __init__(self, project_id=None):
        super().__init__("Project", project_id)


class ConflictError(BookkeepingError):
    """Raised when an operation conflicts with the current state of a record."""
    status_code = 409
    default_message = "Operation conflicts with current state."
