"""Domain layer: business services and exceptions."""
