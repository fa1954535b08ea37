"""Product catalogue with in-memory and SQL repositories, a JSON HTTP API and console demos."""

__version__ = "0.1.0"