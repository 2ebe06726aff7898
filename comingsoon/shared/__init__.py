"""Shared utilities: telemetry and asyncio helpers.

Used by application, infrastructure and API layers. No business logic.
"""
