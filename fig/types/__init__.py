"""Runtime and syntax types for Fig."""
