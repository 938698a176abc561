"""Generation core: domain models, request resolution and dispatch."""
