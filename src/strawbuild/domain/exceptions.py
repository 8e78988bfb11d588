"""Exceptions raised by the construction engine.

These signal programming-contract violations (a configuration shape the
engine does not know, a material id missing from the catalog). Physical
infeasibility is never raised; it is reported as an error diagnostic in
the result sequence instead.
"""


class StrawbuildError(Exception):
    """Base class for all construction engine exceptions."""


class InvalidConfigurationError(StrawbuildError, TypeError):
    """Raised for an unrecognized configuration variant or material kind."""


class MaterialNotFoundError(StrawbuildError, KeyError):
    """Raised when a material id cannot be resolved."""

    def __init__(self, material_id: str) -> None:
        self.material_id = material_id
        super().__init__(material_id)

    def __str__(self) -> str:
        return f"Unknown material: {self.material_id}"
