"""Routes de l'API StreamCat."""
