"""Messages carried by DesktopActionError and its subclasses."""

from enum import Enum


class ErrorMessage(str, Enum):
    URL_IS_NULL = "URL cannot be empty or null."
    INVALID_URL = "Invalid URL: "
    NOT_SUPPORTED = "Desktop actions not supported."
    BROWSE_FAILED = "Failed to open browser."
    FILE_IS_NULL = "File doesn't exist."
    FILE_PATH_IS_NULL = "File path cannot be null or empty."
    FILE_IS_NOT_DIRECTORY = "File is not a directory."
    EXECUTABLE_PATH_IS_NULL = "Executable path cannot be null or empty."
    PROCESS_START_FAILED = "Cannot start process: "
    OPEN_FILE_LOCATION_FAILED = "Failed to open file: "
    OPEN_FILE_DIRECTORY_FAILED = "Failed to open directory: "
    MOVE_TO_TRASH_FAILED = "Failed to move file to trash: "
    TARGET_PATH_IS_NULL = "Target path cannot be null or empty."
    LINK_PATH_IS_NULL = "Link path cannot be null or empty."
    SHORTCUT_CREATION_FAILED = "Unable to create desktop shortcut."
