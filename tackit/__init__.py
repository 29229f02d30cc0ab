"""Three-address code examples, optimisation passes, 8086 emission and string utilities."""

__version__ = "0.1.0"