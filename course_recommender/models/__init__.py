"""Input and output models for the recommendation engine."""
