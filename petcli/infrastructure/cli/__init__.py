"""Console (rich) user interface adapter."""
