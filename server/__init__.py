"""
HTTP front end for docmodules.
"""
