"""Core domain: exceptions, provider integrations, output normalization."""
