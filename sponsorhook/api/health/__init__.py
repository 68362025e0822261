"""Liveness and readiness checks for container deployments."""
