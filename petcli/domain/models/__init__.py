"""Domain models: value objects and the animal records."""
