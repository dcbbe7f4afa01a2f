"""elementsgrid — builds the periodic table grid asset from a static catalog and Wikipedia extracts."""

__version__ = "0.1.0"
