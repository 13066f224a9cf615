# File: housekeeping/core/common/enums.py

from enum import Enum, unique

@unique
class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    LISTING_FAILED = "listing_failed"
    DELETE_FAILED = "delete_failed"

@unique
class FileOperation(str, Enum):
    FORCE_DELETE = "force_delete"
    DELETE_DIRECTORY = "delete_directory"
    CLEAN_DIRECTORY = "clean_directory"
