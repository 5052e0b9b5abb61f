"""Ready-made demo programs."""
