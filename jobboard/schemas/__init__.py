"""
Schemas module - Request/Response schemas for API endpoints.

- Request schemas: what the API accepts (camelCase bodies)
- Public projections: what the API returns for stored records, never
  including password hashes
"""
