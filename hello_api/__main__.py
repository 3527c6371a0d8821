"""
Run the Hello API service with `python -m hello_api`.
"""
from hello_api.main import run

run()
