"""Build and run the JimuReport + MySQL docker compose stack on ARM hosts."""

__version__ = "0.1.0"
