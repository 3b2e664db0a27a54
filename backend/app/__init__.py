"""CityInfo Application Package — read API over cities and their points of interest.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
