"""Feature modules, each registering its own blueprint."""
