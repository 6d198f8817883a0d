"""
Configuration, data model and errors shared by the rest of the package.
"""
