"""
data_exporter.services

Service layer (business rules + transaction owner).

Responsibilities:
- Validate policy input and coordinate repositories.
"""

# Package marker.
