"""Failure kinds raised by filesystem operations.

Each kind carries the label and HTTP status the request layer reports.
"""


class FileSystemError(Exception):
    """Base class for expected filesystem failures."""
    label = "File System Error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPathError(FileSystemError):
    """Path is empty/blank, or a directory name contains a separator."""
    label = "Invalid Path"
    status_code = 400


class InvalidArgumentError(FileSystemError, ValueError):
    """Name is blank, or the removal target is not removable."""
    label = "Invalid Argument"
    status_code = 400


class DirectoryNotFoundError(FileSystemError):
    """Path or name does not lead to a directory."""
    label = "Directory Not Found"
    status_code = 404


class DirectoryAlreadyExistsError(FileSystemError):
    """An entry with the requested name already exists."""
    label = "Directory Already Exists"
    status_code = 409
