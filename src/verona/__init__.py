"""verona — find JDK 9 version-string hazards in compiled Java classes."""

__version__ = "0.1.0"
