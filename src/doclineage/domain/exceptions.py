"""Domain exceptions."""


class DocLineageError(Exception):
    """Base exception for doclineage."""

    pass


class ValidationError(DocLineageError):
    """Validation failed for input data."""

    pass


class NotFound(DocLineageError):
    """Requested resource was not found."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class Conflict(DocLineageError):
    """Concurrent modification lost; reload the current version and retry."""

    pass


class Forbidden(DocLineageError):
    """Operation is rejected by policy and can never succeed this way."""

    pass


class LineageBroken(DocLineageError):
    """Stored version chain failed integrity verification."""

    pass
