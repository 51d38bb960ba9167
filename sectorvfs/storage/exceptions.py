class StorageError(Exception):
    """Raised when the host filesystem refuses a sector store operation"""

    def __init__(self, message: str, file_name: str = ""):
        super().__init__(message)
        self.file_name = file_name
