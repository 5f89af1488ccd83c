"""FastAPI surface serving the rendered document."""
