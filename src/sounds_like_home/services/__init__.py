"""Domain services for prompt rotation, prompt administration and recordings."""
