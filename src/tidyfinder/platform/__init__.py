"""Platform integrations: logging, shell commands and filesystem helpers."""
