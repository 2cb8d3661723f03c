"""Adapters binding the domain ports to REDA, Google Sheets and httpx."""
