class MalformedDatasetError(ValueError):
    """Raised when a station dataset is structurally invalid."""
