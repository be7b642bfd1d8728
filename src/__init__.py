"""Contact Management Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Serverless contact management service using AWS Lambda, SQL storage and a local image store"
)

__all__ = ["handlers", "core"]
