"""CLI module for tablepage."""
