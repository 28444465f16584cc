"""Shared infrastructure: settings, logging, secrets and the Stash server client."""
