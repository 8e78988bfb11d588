"""CLI command implementations for the strawbuild application.

This package contains subcommands for the strawbuild CLI, including:
- validate: Validate a project file
- materials: List the built-in material catalog
"""

from strawbuild.cli.commands.materials import materials_command
from strawbuild.cli.commands.validate import (
    display_load_error,
    display_validation_result,
    validate_command,
)

__all__ = [
    "display_load_error",
    "display_validation_result",
    "materials_command",
    "validate_command",
]
