"""HTTP access to the Discord REST API."""
