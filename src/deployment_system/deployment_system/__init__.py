"""Staff Deployment System package.

This package is organized by feature modules (shifts, breaks, sales, ...)
with a thin Flask controller layer and service/repository layers around a
pure shift rules engine.
"""
