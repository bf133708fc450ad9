"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    EXPORT_FILTER,
    FILENAME_PLACEHOLDER,
    MSG_NEED_FILENAME,
    MSG_NEED_TEXT,
    MSG_OPEN_FAILED,
    MSG_SAVE_CANCELLED,
    MSG_SAVE_FAILED,
    MSG_SAVED,
    MSG_TITLE,
    OPEN_FILTERS,
    STAGING_DIR_PREFIX,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "EXPORT_FILTER",
    "FILENAME_PLACEHOLDER",
    "MSG_TITLE",
    "MSG_SAVED",
    "MSG_NEED_FILENAME",
    "MSG_NEED_TEXT",
    "MSG_OPEN_FAILED",
    "MSG_SAVE_CANCELLED",
    "MSG_SAVE_FAILED",
    "OPEN_FILTERS",
    "STAGING_DIR_PREFIX",
]
