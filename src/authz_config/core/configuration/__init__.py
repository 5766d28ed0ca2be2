"""Construction of configuration properties."""

from authz_config.core.configuration.property_builder import ConfigurationPropertyBuilder

__all__ = ["ConfigurationPropertyBuilder"]
