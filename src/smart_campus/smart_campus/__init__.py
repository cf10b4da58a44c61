"""Smart Campus package.

This package is organized by feature modules (institutions, academics,
facilities, attendance, ...) with a thin Flask controller layer and
service/repository layers underneath.
"""
