"""Top-level rendercli commands (one module per command)."""
