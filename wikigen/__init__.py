"""wikigen -- turn generated documentation topics into a Markdown wiki."""

__version__ = "0.1.0"
