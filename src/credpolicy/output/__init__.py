"""Output layer — render PolicyResult for humans or machines."""
