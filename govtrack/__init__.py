"""govtrack: an in-memory government project registry."""
