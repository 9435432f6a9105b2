"""Exception hierarchy for BoundedPath."""


class BoundedPathError(Exception):
    """Base exception for all BoundedPath errors."""

    pass


class GeometryError(BoundedPathError):
    """Errors in geometric calculations."""

    pass


class EmptyPointSetError(GeometryError):
    """A point search was given no points to search."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot run '{operation}' on an empty point set")


class CursorRangeError(GeometryError):
    """Index cursor constructed over an empty range."""

    def __init__(self, start: int, stop: int) -> None:
        self.start = start
        self.stop = stop
        super().__init__(f"Cursor range [{start}, {stop}) is empty")


class TransformError(GeometryError):
    """Invalid coordinate-space transformation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TriangulationError(BoundedPathError):
    """Errors related to ribbon triangulation."""

    pass


class InsufficientBoundaryError(TriangulationError):
    """A boundary has too few points to triangulate."""

    def __init__(self, kind: str, count: int, minimum: int = 2) -> None:
        self.kind = kind
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Boundary '{kind}' has {count} points, at least {minimum} required"
        )


class BoundaryFileError(BoundedPathError):
    """Errors related to boundary file loading or output saving."""

    pass


class BoundaryLoadError(BoundaryFileError):
    """Error loading a boundary file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load boundaries '{path}': {reason}")


class BoundarySaveError(BoundaryFileError):
    """Error saving a mesh or centerline file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save '{path}': {reason}")


class SampleCountError(BoundaryFileError):
    """Boundary has fewer samples than the configured floor."""

    def __init__(self, path: str, kind: str, count: int, minimum: int) -> None:
        self.path = path
        self.kind = kind
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Boundary '{kind}' in '{path}' has {count} samples, minimum is {minimum}"
        )

