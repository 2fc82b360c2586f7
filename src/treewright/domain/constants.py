from __future__ import annotations

"""
Domain Constants.

Centralizes the ledger messages reported for structural (validation) and
operational (creation) failures, along with runtime defaults.
"""

DEFAULT_ENCODING = "utf-8"
APP_NAME = "treewright"

# -----------------------------------------------------------------------------
# STRUCTURAL ERRORS (VALIDATION PHASE)
# -----------------------------------------------------------------------------

DESTINATION_BLANK = "Destination is blank."
DESTINATION_INVALID = "Destination is not a valid directory name."
DESTINATION_NOT_DIRECTORY = "Destination does not correspond to a directory."

NAME_BLANK = "Entry name is blank."
NAME_INVALID = "Entry name is not a valid file name."

FILE_EXISTS_ON_DISK = "File with the same name already exists on disk."
FILE_DECLARED_TWICE = "File with the same name was already declared in the parent directory."

DIRECTORY_CIRCULAR = "Detected circular dependency with the directory."
DIRECTORY_EXISTS_ON_DISK = "Directory with the same name already exists on disk."
DIRECTORY_DECLARED_TWICE = (
    "Directory with the same name was already declared in the parent directory."
)

# -----------------------------------------------------------------------------
# OPERATIONAL ERRORS (CREATION PHASE)
# -----------------------------------------------------------------------------

FILE_CREATE_EXISTS = "File with the same name exists on the disk."
FILE_CREATE_UNSUPPORTED = "Could not create file with default attributes."
FILE_CREATE_PERMISSION = "Insufficient permissions to create the file."
FILE_CREATE_IO = "An unexpected error occurred while creating the file."
FILE_WRITE_FAILED = "An unexpected error occurred while writing content to the file."

DIRECTORY_CREATE_EXISTS = "Directory with the same name exists on the disk."
DIRECTORY_CREATE_UNSUPPORTED = "Could not create directory with default attributes."
DIRECTORY_CREATE_PERMISSION = "Insufficient permissions to create the directory."
DIRECTORY_CREATE_IO = "An unexpected error occurred while creating the directory."
