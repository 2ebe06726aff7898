"""Application layer: DTOs, collaborator interfaces, services and use cases."""
