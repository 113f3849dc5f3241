"""Business logic for the portfolio content model."""
