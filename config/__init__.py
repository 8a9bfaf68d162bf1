"""Django project configuration for the museum booking backend."""
