class DimensionMismatch(Exception):
    # Raised when two matrices used together do not have the same size
    pass


class ShapeError(Exception):
    # Raised when data handed to a matrix cannot form a valid square grid
    pass


class IngestionError(Exception):
    # Raised when matrix data read from text is malformed or incomplete
    pass
