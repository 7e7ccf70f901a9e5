from .log import get_logger, setup_logging
from .mime import (
    FOLDER_MIME,
    ROOT_FOLDER_ID,
    ROOT_FOLDER_NAME,
    is_root_name,
)

__all__ = [
    "FOLDER_MIME",
    "ROOT_FOLDER_ID",
    "ROOT_FOLDER_NAME",
    "is_root_name",
    "get_logger",
    "setup_logging",
]
