"""Combat domain: definitions, entities and combat formulas."""
