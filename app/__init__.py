"""
Counter demo application.

Run with `python -m app.main`.
"""
