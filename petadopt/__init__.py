"""
PetAdopt API - backend for a pet-adoption service.

Users, pets, adoption records, an adoption workflow pairing a user with a
pet, and a generator of synthetic test data.
"""

__version__ = "1.0.0"
