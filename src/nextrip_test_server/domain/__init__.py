"""Domain layer - departure models and ports."""
