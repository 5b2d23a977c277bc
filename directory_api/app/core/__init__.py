"""Configuration, logging and error definitions shared by the application."""
