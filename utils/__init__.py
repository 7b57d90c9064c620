from utils.logger import attach_log_file, detach_handlers, logger

__all__ = [
    "logger",
    "attach_log_file",
    "detach_handlers",
]
