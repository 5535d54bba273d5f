"""
Core request logic: endpoint resolution and fetching.
"""
