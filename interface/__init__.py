"""Outer interfaces: the line protocol driver and the REST API."""
