"""Configuration, logging, domain errors and persistence."""
