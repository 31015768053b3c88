"""
Infrastructure layer of ndview: numpy-backed storage, the concrete Ndarray,
array builders and runtime configuration.
"""
