"""Platform abstraction layer."""

from .cwd import EnterDirectoryError, working_directory
from .paths import (
    default_config_path,
    home,
    user_config_dir,
)
from .process import (
    ProcessError,
    run_live,
    run_pipeline,
)

__all__ = [
    # cwd
    "EnterDirectoryError",
    "working_directory",
    # paths
    "default_config_path",
    "home",
    "user_config_dir",
    # process
    "ProcessError",
    "run_live",
    "run_pipeline",
]
