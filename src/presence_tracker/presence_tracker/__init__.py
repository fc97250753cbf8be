"""Office presence tracker package.

This package is organized by feature modules (users, categories, holidays,
attendance, reports) with a thin Flask controller layer and service/repository
layers underneath.
"""
