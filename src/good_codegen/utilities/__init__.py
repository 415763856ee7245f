from good_codegen.utilities.logger import (
    DEFAULT_FORMAT,
    configure_library_logging,
    level_for_verbosity,
)

__all__ = ["DEFAULT_FORMAT", "configure_library_logging", "level_for_verbosity"]
