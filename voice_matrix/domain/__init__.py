"""Domain layer: templates, prompt assembly, assistants."""
