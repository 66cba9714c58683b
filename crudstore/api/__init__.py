"""
HTTP binding for the resource stores.
"""
