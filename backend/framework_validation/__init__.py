"""Framework Validation — structural scoring for architecture diagrams."""
