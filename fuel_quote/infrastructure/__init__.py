"""Infrastructure layer: MongoDB, in-memory and security adapters."""
