"""Domain layer: models, pricing, repository and capability interfaces."""
