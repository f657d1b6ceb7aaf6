"""Domain layer: error taxonomy and authentication ports."""
