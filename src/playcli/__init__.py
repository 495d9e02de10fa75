"""play-cli - run and browse practice projects from the terminal."""

__version__ = "0.1.0"
