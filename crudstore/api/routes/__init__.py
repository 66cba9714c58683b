"""Resource route modules."""
