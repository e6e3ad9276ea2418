"""Login API client, response validator and live specs."""
