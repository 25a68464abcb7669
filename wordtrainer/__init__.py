"""Terminal vocabulary trainer: lessons, progress tracking and archiving of learned words."""

__version__ = "0.1.0"