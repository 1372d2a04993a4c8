"""Component packages of the integration engine."""
