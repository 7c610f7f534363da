"""
Loan Gateway - Loan Decision Service

A FastAPI-based microservice that decides the largest loan amount and
period an applicant can be approved for.
"""

__version__ = "0.1.0"
