"""
hello-api: a small FastAPI service serving fixed JSON payloads.
"""
__version__ = "1.0.0"
