"""Template-driven voice assistant configuration service."""
