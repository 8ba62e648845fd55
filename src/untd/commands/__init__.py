"""Click plumbing for the untd command: base command class and app context."""
