"""API module for the health-travel service.

- Validates inputs, reads/writes DB through the domain layer
- Returns camelCase JSON payloads for the client app
- Forbidden: business rules, direct SQL
"""
