''' snapcore: Shared utilities for the Snap sketch tools.

    config  - constants (radii, colours, dash patterns, demo layout)
    display - console header / event log

Versioning is Major.Minor.Patch: Major breaks scripts, Minor adds features
(e.g., a new overlay), Patch fixes bugs.
'''
__version__ = "0.7.0"
