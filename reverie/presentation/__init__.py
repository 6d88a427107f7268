"""Transports exposing the LogService: the HTTP API and the command line."""
