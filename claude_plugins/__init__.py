"""Claude Code plugins: markdown commands, agents and skills, plus their installer."""

__version__ = "0.1.0"
