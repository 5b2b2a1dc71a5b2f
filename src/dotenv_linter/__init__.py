"""dotenv-linter: lint .env files for style and correctness problems."""

__version__ = "1.1.0"
