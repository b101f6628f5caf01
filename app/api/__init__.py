"""HTTP layer: localized error replies and catalog routes."""
