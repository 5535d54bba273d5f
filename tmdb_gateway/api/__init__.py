"""
HTTP surface for the gateway.
"""
