"""Service layer: schema inspection and payload checks behind the CLI.

INVARIANT: All service-layer methods return ServiceResult.
"""
