"""Exception types raised by the core engine.

Order validation problems are never raised; they are returned as
``ValidationResult`` data. Only catalog authoring mistakes raise.
"""


class ConfigurationError(ValueError):
    """A category definition cannot be turned into a property schema."""


class CatalogError(ValueError):
    """A catalog document cannot be read into catalog entities."""


__all__ = ["CatalogError", "ConfigurationError"]
