"""pwcheck — batch password policy validator."""

__version__ = "1.0.0"
