"""Domain layer - collaborator interfaces and domain errors."""
