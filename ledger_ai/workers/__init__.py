"""Workers package: background jobs for classification runs."""
