"""Keep a cricket scoresheet: record an innings ball by ball and save it by name."""

__version__ = "0.1.0"