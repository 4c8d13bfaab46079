"""Shared utilities: telemetry (logging, tracing) and cross-cutting helpers.

Used by application and infrastructure. No business logic.
"""
